"""Project 요청/응답 계약을 위한 Pydantic 스키마입니다."""

from pydantic import Field, field_validator
from typing import Optional, List
from datetime import datetime

from app.schemas.common import CamelModel, CamelOut, check_http_url, check_image_ref


class ProjectCreate(CamelModel):
    title: str = Field(min_length=3, max_length=200)
    description: str = Field(min_length=10)
    image_url: str
    technologies: List[str] = Field(default_factory=list)
    project_url: Optional[str] = None
    github_url: Optional[str] = None
    featured: bool = False
    author_id: Optional[int] = None

    @field_validator("image_url")
    @classmethod
    def _check_image(cls, value: str) -> str:
        return check_image_ref(value)

    @field_validator("project_url", "github_url")
    @classmethod
    def _check_links(cls, value: Optional[str]) -> Optional[str]:
        return check_http_url(value)

    @field_validator("technologies")
    @classmethod
    def _strip_technologies(cls, value: List[str]) -> List[str]:
        return [item.strip() for item in value if item and item.strip()]


class ProjectUpdate(CamelModel):
    title: Optional[str] = None
    description: Optional[str] = None
    image_url: Optional[str] = None
    technologies: Optional[List[str]] = None
    project_url: Optional[str] = None
    github_url: Optional[str] = None
    featured: Optional[bool] = None


class ProjectOut(CamelOut):
    id: int
    title: str
    description: str
    image_url: str
    technologies: List[str] = Field(default_factory=list)
    project_url: Optional[str] = None
    github_url: Optional[str] = None
    featured: bool
    author_id: Optional[int] = None
    author_name: Optional[str] = None
    created_at: datetime
