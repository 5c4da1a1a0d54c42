"""Permissions 관련 공용 유틸리티 헬퍼입니다."""

from typing import Optional

from app.models.user import User


ADMIN = "admin"
USER = "user"


def is_admin(user: Optional[User]) -> bool:
    return user is not None and user.role == ADMIN


def can_view_blog(blog, user: Optional[User]) -> bool:
    return bool(blog.published) or is_admin(user)
