"""Contact 요청/응답 계약을 위한 Pydantic 스키마입니다."""

from pydantic import EmailStr, Field
from datetime import datetime

from app.schemas.common import CamelModel, CamelOut


class ContactCreate(CamelModel):
    name: str = Field(min_length=2, max_length=100)
    email: EmailStr
    subject: str = Field(min_length=3, max_length=200)
    message: str = Field(min_length=10)


class ContactInput(CamelModel):
    name: str
    email: str
    subject: str
    message: str


class ContactOut(CamelOut):
    id: int
    name: str
    email: str
    subject: str
    message: str
    read: bool
    created_at: datetime
