"""Contact Service 도메인 서비스 레이어입니다. 비즈니스 규칙과 데이터 접근 흐름을 캡슐화합니다."""

import logging
from typing import Any, Dict, List, Optional, Union

from sqlalchemy.orm import Session
from app.models.contact import Contact
from app.schemas.contact import ContactCreate, ContactInput
from app.utils.validation import validate_payload

logger = logging.getLogger(__name__)


def _ordered(query):
    return query.order_by(Contact.created_at.desc(), Contact.id.desc())


def get_contacts(db: Session) -> List[Contact]:
    return _ordered(db.query(Contact)).all()


def get_unread_contacts(db: Session) -> List[Contact]:
    return _ordered(db.query(Contact).filter(Contact.read == False)).all()  # noqa: E712


def get_contact(db: Session, contact_id: int) -> Optional[Contact]:
    return db.query(Contact).filter(Contact.id == contact_id).first()


def create_contact(db: Session, data: Union[ContactInput, ContactCreate, Dict[str, Any]]) -> Contact:
    validated = validate_payload(ContactCreate, data)
    # read always starts false, whatever the submitter sent
    contact = Contact(**validated.model_dump(), read=False)
    db.add(contact)
    db.commit()
    db.refresh(contact)
    logger.info("contact received id=%s subject=%r", contact.id, contact.subject)
    return contact


def mark_contact_read(db: Session, contact_id: int) -> Optional[Contact]:
    contact = get_contact(db, contact_id)
    if not contact:
        return None
    if not contact.read:
        contact.read = True
        db.commit()
        db.refresh(contact)
    return contact


def delete_contact(db: Session, contact_id: int) -> bool:
    contact = get_contact(db, contact_id)
    if not contact:
        return False
    db.delete(contact)
    db.commit()
    logger.info("contact deleted id=%s", contact_id)
    return True
