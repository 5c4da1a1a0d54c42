"""Categories 기능 API 라우터입니다. 요청을 검증하고 서비스 레이어로 비즈니스 로직을 위임합니다."""

from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from app.database import get_db
from app.schemas.category import CategoryCreate, CategoryOut, CategoryUpdate
from app.schemas.common import MessageOut
from app.services import category_service
from app.middleware.auth_middleware import require_admin
from app.models.user import User
from app.utils.errors import NotFoundError

router = APIRouter(tags=["categories"])


@router.get("/api/categories", response_model=List[CategoryOut])
def list_categories(db: Session = Depends(get_db)):
    return category_service.get_categories(db)


@router.get("/api/categories/slug/{slug}", response_model=CategoryOut)
def get_category_by_slug(slug: str, db: Session = Depends(get_db)):
    category = category_service.get_category_by_slug(db, slug)
    if not category:
        raise NotFoundError("Category")
    return category


@router.get("/api/categories/{category_id}", response_model=CategoryOut)
def get_category(category_id: int, db: Session = Depends(get_db)):
    category = category_service.get_category(db, category_id)
    if not category:
        raise NotFoundError("Category")
    return category


@router.post("/api/admin/categories", response_model=CategoryOut, status_code=status.HTTP_201_CREATED)
def create_category(
    data: CategoryCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
):
    return category_service.create_category(db, data)


@router.put("/api/admin/categories/{category_id}", response_model=CategoryOut)
def update_category(
    category_id: int,
    data: CategoryUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
):
    category = category_service.update_category(db, category_id, data)
    if not category:
        raise NotFoundError("Category")
    return category


@router.delete("/api/admin/categories/{category_id}", response_model=MessageOut)
def delete_category(
    category_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
):
    if not category_service.delete_category(db, category_id):
        raise NotFoundError("Category")
    return {"message": "Category deleted successfully"}
