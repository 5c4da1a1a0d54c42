"""Blog 요청/응답 계약을 위한 Pydantic 스키마입니다."""

from pydantic import Field, field_validator
from typing import Optional
from datetime import datetime

from app.schemas.category import SLUG_PATTERN
from app.schemas.common import CamelModel, CamelOut, check_image_ref


class BlogCreate(CamelModel):
    title: str = Field(min_length=3, max_length=200)
    slug: str = Field(min_length=3, max_length=220, pattern=SLUG_PATTERN)
    content: str = Field(min_length=10)
    excerpt: str = Field(min_length=10)
    image_url: str
    category_id: Optional[int] = None
    author_id: Optional[int] = None
    published: bool = False

    @field_validator("image_url")
    @classmethod
    def _check_image(cls, value: str) -> str:
        return check_image_ref(value)


class BlogUpdate(CamelModel):
    title: Optional[str] = None
    slug: Optional[str] = None
    content: Optional[str] = None
    excerpt: Optional[str] = None
    image_url: Optional[str] = None
    category_id: Optional[int] = None
    published: Optional[bool] = None


class BlogOut(CamelOut):
    id: int
    title: str
    slug: str
    content: str
    excerpt: str
    image_url: str
    category_id: Optional[int] = None
    category_name: Optional[str] = None
    author_id: Optional[int] = None
    author_name: Optional[str] = None
    published: bool
    created_at: datetime
    updated_at: datetime
