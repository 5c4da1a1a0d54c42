"""Blog Service 도메인 서비스 레이어입니다. 비즈니스 규칙과 데이터 접근 흐름을 캡슐화합니다."""

import logging
from typing import Any, Dict, List, Optional, Union

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from app.models.blog import Blog
from app.schemas.blog import BlogCreate, BlogUpdate
from app.utils.errors import ValidationError
from app.utils.helpers import utcnow
from app.utils.validation import as_payload, validate_merged, validate_payload

logger = logging.getLogger(__name__)

FEATURED_BLOG_LIMIT = 3


def _ordered(query):
    return query.order_by(Blog.created_at.desc(), Blog.id.desc())


def _ensure_slug_available(db: Session, slug: str, exclude_id: Optional[int] = None):
    query = db.query(Blog.id).filter(Blog.slug == slug)
    if exclude_id is not None:
        query = query.filter(Blog.id != exclude_id)
    if query.first():
        raise ValidationError.for_field("slug", f"Slug '{slug}' is already in use")


def _commit(db: Session, slug: str):
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ValidationError.for_field("slug", f"Slug '{slug}' is already in use")


def get_blogs(db: Session, published: Optional[bool] = None) -> List[Blog]:
    query = db.query(Blog)
    if published is not None:
        query = query.filter(Blog.published == published)
    return _ordered(query).all()


def get_featured_blogs(db: Session) -> List[Blog]:
    """The most recent published posts."""
    query = db.query(Blog).filter(Blog.published == True)  # noqa: E712
    return _ordered(query).limit(FEATURED_BLOG_LIMIT).all()


def get_blog(db: Session, blog_id: int) -> Optional[Blog]:
    return db.query(Blog).filter(Blog.id == blog_id).first()


def get_blog_by_slug(db: Session, slug: str) -> Optional[Blog]:
    return db.query(Blog).filter(Blog.slug == slug).first()


def create_blog(db: Session, data: Union[BlogCreate, Dict[str, Any]]) -> Blog:
    validated = validate_payload(BlogCreate, data)
    _ensure_slug_available(db, validated.slug)
    now = utcnow()
    blog = Blog(**validated.model_dump(), created_at=now, updated_at=now)
    db.add(blog)
    _commit(db, validated.slug)
    db.refresh(blog)
    logger.info("blog created id=%s slug=%s published=%s", blog.id, blog.slug, blog.published)
    return blog


def update_blog(db: Session, blog_id: int, data: Union[BlogUpdate, Dict[str, Any]]) -> Optional[Blog]:
    blog = get_blog(db, blog_id)
    if not blog:
        return None
    changes = validate_merged(BlogCreate, blog, as_payload(data, partial=True))
    if "slug" in changes:
        _ensure_slug_available(db, changes["slug"], exclude_id=blog.id)
    for k, v in changes.items():
        setattr(blog, k, v)
    blog.updated_at = max(utcnow(), blog.created_at)
    _commit(db, blog.slug)
    db.refresh(blog)
    logger.info("blog updated id=%s fields=%s", blog.id, sorted(changes))
    return blog


def delete_blog(db: Session, blog_id: int) -> bool:
    blog = get_blog(db, blog_id)
    if not blog:
        return False
    db.delete(blog)
    db.commit()
    logger.info("blog deleted id=%s", blog_id)
    return True
