"""Video 요청/응답 계약을 위한 Pydantic 스키마입니다."""

from pydantic import Field, field_validator
from typing import Optional
from datetime import datetime

from app.schemas.common import CamelModel, CamelOut, check_image_ref


class VideoCreate(CamelModel):
    title: str = Field(min_length=3, max_length=200)
    video_id: str = Field(min_length=1, max_length=64)
    thumbnail_url: str
    views: Optional[int] = Field(default=None, ge=0)
    published_at: Optional[datetime] = None
    featured: bool = False
    order: int = 0

    @field_validator("thumbnail_url")
    @classmethod
    def _check_thumbnail(cls, value: str) -> str:
        return check_image_ref(value)


class VideoInput(CamelModel):
    """Request body for create; the thumbnail may be left out and derived from ``video_id``."""

    title: str
    video_id: str
    thumbnail_url: Optional[str] = None
    views: Optional[int] = None
    published_at: Optional[datetime] = None
    featured: bool = False
    order: int = 0


class VideoUpdate(CamelModel):
    title: Optional[str] = None
    video_id: Optional[str] = None
    thumbnail_url: Optional[str] = None
    views: Optional[int] = None
    published_at: Optional[datetime] = None
    featured: Optional[bool] = None
    order: Optional[int] = None


class VideoOut(CamelOut):
    id: int
    title: str
    video_id: str
    thumbnail_url: str
    views: Optional[int] = None
    published_at: Optional[datetime] = None
    featured: bool
    order: int
