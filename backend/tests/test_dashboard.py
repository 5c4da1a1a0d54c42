"""Test Dashboard 동작과 회귀 시나리오를 검증하는 자동화 테스트입니다."""

from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from app.models.blog import Blog
from app.models.contact import Contact
from app.models.project import Project
from app.models.skill import Skill
from app.main import app
from app.services import project_service, skill_service
from tests.conftest import auth_headers


def test_dashboard_empty(client, seed_users):
    resp = client.get("/api/admin/dashboard", headers=auth_headers(client))
    assert resp.status_code == 200
    data = resp.json()
    assert all(value == 0 for value in data["counts"].values())
    assert data["recentContacts"] == []


def test_dashboard_counts(client, db, seed_users, seed_category):
    db.add_all([
        Project(title="Featured one", description="Featured project body", image_url="/uploads/images/a.png",
                featured=True),
        Project(title="Plain one", description="Plain project body here", image_url="/uploads/images/b.png"),
        Blog(title="Live", slug="live", content="Published content", excerpt="Published excerpt",
             image_url="/uploads/images/c.png", published=True),
        Blog(title="Draft", slug="draft", content="Draft content here", excerpt="Draft excerpt",
             image_url="/uploads/images/d.png", published=False),
        Skill(name="Python", percentage=90, category="backend", order=1),
    ])
    for i in range(6):
        db.add(Contact(name="Visitor", email="v@example.com", subject=f"Subject {i}",
                       message="Message body text", read=i < 2))
    db.commit()

    data = client.get("/api/admin/dashboard", headers=auth_headers(client)).json()
    counts = data["counts"]
    assert counts["projects"] == 2
    assert counts["featuredProjects"] == 1
    assert counts["blogs"] == 2
    assert counts["publishedBlogs"] == 1
    assert counts["draftBlogs"] == 1
    assert counts["skills"] == 1
    assert counts["categories"] == 1
    assert counts["videos"] == 0
    assert counts["contacts"] == 6
    assert counts["unreadContacts"] == 4
    assert len(data["recentContacts"]) == 5
    assert data["recentContacts"][0]["subject"] == "Subject 5"


def test_storage_failure_returns_500(client, monkeypatch):
    def broken(db):
        raise OperationalError("SELECT 1", {}, Exception("database is locked"))

    monkeypatch.setattr(project_service, "get_projects", broken)
    resp = client.get("/api/projects")
    assert resp.status_code == 500
    assert resp.json() == {"detail": "Internal server error"}


def test_unexpected_error_returns_json_500(monkeypatch):
    def broken(db):
        raise RuntimeError("boom")

    monkeypatch.setattr(skill_service, "get_skills", broken)
    client = TestClient(app, raise_server_exceptions=False)
    resp = client.get("/api/skills")
    assert resp.status_code == 500
    assert resp.headers["content-type"].startswith("application/json")
    assert resp.json() == {"detail": "Internal server error"}
