"""Category 요청/응답 계약을 위한 Pydantic 스키마입니다."""

from typing import Optional

from pydantic import Field

from app.schemas.common import CamelModel, CamelOut

SLUG_PATTERN = r"^[a-z0-9]+(?:-[a-z0-9]+)*$"


class CategoryCreate(CamelModel):
    name: str = Field(min_length=2, max_length=100)
    slug: str = Field(min_length=2, max_length=120, pattern=SLUG_PATTERN)


class CategoryUpdate(CamelModel):
    name: Optional[str] = None
    slug: Optional[str] = None


class CategoryOut(CamelOut):
    id: int
    name: str
    slug: str
