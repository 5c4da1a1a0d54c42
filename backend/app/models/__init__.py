"""SQLAlchemy 모델 패키지 초기화 모듈입니다."""

from app.models.user import User
from app.models.project import Project
from app.models.skill import Skill
from app.models.category import Category
from app.models.blog import Blog
from app.models.video import Video
from app.models.contact import Contact

__all__ = [
    "User",
    "Project",
    "Skill",
    "Category",
    "Blog",
    "Video",
    "Contact",
]
