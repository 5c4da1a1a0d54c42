"""User 도메인의 SQLAlchemy 모델 정의입니다."""

from sqlalchemy import Column, Integer, String, DateTime
from app.database import Base
from app.utils.helpers import utcnow


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(50), unique=True, nullable=False)
    password = Column(String(255), nullable=False)  # pbkdf2_sha256 hash
    name = Column(String(100), nullable=False)
    email = Column(String(255), nullable=False)
    role = Column(String(20), nullable=False, default="user")  # user/admin
    created_at = Column(DateTime, default=utcnow, nullable=False)
