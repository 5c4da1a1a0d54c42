"""User Service 도메인 서비스 레이어입니다. 비즈니스 규칙과 데이터 접근 흐름을 캡슐화합니다."""

import logging
from typing import Any, Dict, Optional, Union

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.models.user import User
from app.schemas.user import UserCreate
from app.utils.errors import ValidationError
from app.utils.permissions import USER
from app.utils.validation import validate_payload

logger = logging.getLogger(__name__)


def get_user(db: Session, user_id: int) -> Optional[User]:
    return db.query(User).filter(User.id == user_id).first()


def get_user_by_username(db: Session, username: str) -> Optional[User]:
    return db.query(User).filter(User.username == username).first()


def create_user(db: Session, data: Union[UserCreate, Dict[str, Any]]) -> User:
    from app.services.auth_service import hash_password

    validated = validate_payload(UserCreate, data)
    if get_user_by_username(db, validated.username):
        raise ValidationError.for_field("username", "Username already exists")
    payload = validated.model_dump()
    payload["password"] = hash_password(validated.password)
    user = User(**payload)
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ValidationError.for_field("username", "Username already exists")
    db.refresh(user)
    logger.info("user created id=%s username=%s role=%s", user.id, user.username, user.role)
    return user


def register_user(db: Session, data: Dict[str, Any]) -> User:
    """Self-service sign-up; the role is always ``user`` regardless of input."""
    payload = dict(data)
    payload["role"] = USER
    return create_user(db, payload)
