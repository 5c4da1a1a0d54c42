"""Contacts 기능 API 라우터입니다. 요청을 검증하고 서비스 레이어로 비즈니스 로직을 위임합니다."""

from typing import List, Optional

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from app.database import get_db
from app.schemas.contact import ContactInput, ContactOut
from app.schemas.common import MessageOut
from app.services import contact_service
from app.middleware.auth_middleware import require_admin
from app.models.user import User
from app.utils.errors import NotFoundError
from app.utils.helpers import query_flag

router = APIRouter(tags=["contacts"])


@router.post("/api/contacts", response_model=ContactOut, status_code=status.HTTP_201_CREATED)
def submit_contact(data: ContactInput, db: Session = Depends(get_db)):
    return contact_service.create_contact(db, data)


@router.get("/api/admin/contacts", response_model=List[ContactOut])
def list_contacts(
    unread: Optional[str] = None,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
):
    if query_flag(unread):
        return contact_service.get_unread_contacts(db)
    return contact_service.get_contacts(db)


@router.get("/api/admin/contacts/{contact_id}", response_model=ContactOut)
def get_contact(
    contact_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
):
    contact = contact_service.get_contact(db, contact_id)
    if not contact:
        raise NotFoundError("Contact")
    return contact


@router.put("/api/admin/contacts/{contact_id}/read", response_model=ContactOut)
def mark_contact_read(
    contact_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
):
    contact = contact_service.mark_contact_read(db, contact_id)
    if not contact:
        raise NotFoundError("Contact")
    return contact


@router.delete("/api/admin/contacts/{contact_id}", response_model=MessageOut)
def delete_contact(
    contact_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
):
    if not contact_service.delete_contact(db, contact_id):
        raise NotFoundError("Contact")
    return {"message": "Contact deleted successfully"}
