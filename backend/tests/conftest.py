import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from app.config import settings
from app.database import Base, get_db
from app.main import app
from app.models.user import User
from app.models.category import Category
from app.services.auth_service import hash_password

TEST_DB_URL = "sqlite:///./test_portfolio.db"

ADMIN_PASSWORD = "admin-pass-123"
USER_PASSWORD = "user-pass-123"

# 8-byte PNG signature is enough for type/size checks
PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 32

engine = create_engine(TEST_DB_URL, connect_args={"check_same_thread": False})
TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db():
    db = TestingSession()
    try:
        yield db
    finally:
        db.close()


app.dependency_overrides[get_db] = override_get_db


@pytest.fixture(autouse=True)
def setup_db():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(autouse=True)
def upload_dir(tmp_path, monkeypatch):
    target = tmp_path / "uploads"
    target.mkdir()
    monkeypatch.setattr(settings, "UPLOAD_DIR", str(target))
    return target


@pytest.fixture
def db():
    db = TestingSession()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def seed_users(db):
    users = {
        "admin": User(
            username="admin", password=hash_password(ADMIN_PASSWORD),
            name="Admin", email="admin@example.com", role="admin",
        ),
        "user": User(
            username="visitor", password=hash_password(USER_PASSWORD),
            name="Visitor", email="visitor@example.com", role="user",
        ),
    }
    for u in users.values():
        db.add(u)
    db.commit()
    for u in users.values():
        db.refresh(u)
    return users


@pytest.fixture
def seed_category(db):
    category = Category(name="Web Development", slug="web-development")
    db.add(category)
    db.commit()
    db.refresh(category)
    return category


def get_token(client, username: str, password: str) -> str:
    resp = client.post("/api/auth/login", json={"username": username, "password": password})
    assert resp.status_code == 200, resp.text
    return resp.json()["accessToken"]


def auth_headers(client, username: str = "admin", password: str = ADMIN_PASSWORD) -> dict:
    return {"Authorization": f"Bearer {get_token(client, username, password)}"}


def user_headers(client) -> dict:
    return auth_headers(client, "visitor", USER_PASSWORD)


def image_file(name: str = "cover.png", content: bytes = PNG_BYTES, content_type: str = "image/png"):
    return {"image": (name, content, content_type)}
