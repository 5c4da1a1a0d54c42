"""Category Service 도메인 서비스 레이어입니다. 비즈니스 규칙과 데이터 접근 흐름을 캡슐화합니다."""

import logging
from typing import Any, Dict, List, Optional, Union

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from app.models.category import Category
from app.schemas.category import CategoryCreate, CategoryUpdate
from app.utils.errors import ValidationError
from app.utils.validation import as_payload, validate_merged, validate_payload

logger = logging.getLogger(__name__)


def _ensure_unique(db: Session, name: Optional[str], slug: Optional[str], exclude_id: Optional[int] = None):
    errors = []
    if name is not None:
        query = db.query(Category.id).filter(Category.name == name)
        if exclude_id is not None:
            query = query.filter(Category.id != exclude_id)
        if query.first():
            errors.append({"field": "name", "message": f"Category name '{name}' already exists"})
    if slug is not None:
        query = db.query(Category.id).filter(Category.slug == slug)
        if exclude_id is not None:
            query = query.filter(Category.id != exclude_id)
        if query.first():
            errors.append({"field": "slug", "message": f"Slug '{slug}' is already in use"})
    if errors:
        raise ValidationError(errors)


def _commit(db: Session):
    try:
        db.commit()
    except IntegrityError as exc:
        # a concurrent writer took the name or slug between check and commit
        db.rollback()
        detail = str(exc.orig)
        fields = [field for field in ("name", "slug") if f"categories.{field}" in detail] or ["name", "slug"]
        raise ValidationError([{"field": field, "message": f"Category {field} is already in use"} for field in fields])


def get_categories(db: Session) -> List[Category]:
    return db.query(Category).order_by(Category.name.asc()).all()


def get_category(db: Session, category_id: int) -> Optional[Category]:
    return db.query(Category).filter(Category.id == category_id).first()


def get_category_by_slug(db: Session, slug: str) -> Optional[Category]:
    return db.query(Category).filter(Category.slug == slug).first()


def create_category(db: Session, data: Union[CategoryCreate, Dict[str, Any]]) -> Category:
    validated = validate_payload(CategoryCreate, data)
    _ensure_unique(db, validated.name, validated.slug)
    category = Category(**validated.model_dump())
    db.add(category)
    _commit(db)
    db.refresh(category)
    logger.info("category created id=%s slug=%s", category.id, category.slug)
    return category


def update_category(
    db: Session,
    category_id: int,
    data: Union[CategoryUpdate, Dict[str, Any]],
) -> Optional[Category]:
    category = get_category(db, category_id)
    if not category:
        return None
    changes = validate_merged(CategoryCreate, category, as_payload(data, partial=True))
    _ensure_unique(db, changes.get("name"), changes.get("slug"), exclude_id=category.id)
    for k, v in changes.items():
        setattr(category, k, v)
    _commit(db)
    db.refresh(category)
    return category


def delete_category(db: Session, category_id: int) -> bool:
    category = get_category(db, category_id)
    if not category:
        return False
    # Blogs keep their category_id; readers treat it as uncategorized.
    db.delete(category)
    db.commit()
    logger.info("category deleted id=%s", category_id)
    return True
