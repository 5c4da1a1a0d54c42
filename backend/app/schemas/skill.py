"""Skill 요청/응답 계약을 위한 Pydantic 스키마입니다."""

from typing import Literal, Optional

from pydantic import Field

from app.schemas.common import CamelModel, CamelOut

SkillCategory = Literal["frontend", "backend", "database", "tools", "cloud"]


class SkillCreate(CamelModel):
    name: str = Field(min_length=2, max_length=100)
    percentage: int = Field(ge=0, le=100)
    category: SkillCategory
    order: int = 0


class SkillUpdate(CamelModel):
    name: Optional[str] = None
    percentage: Optional[int] = None
    category: Optional[str] = None
    order: Optional[int] = None


class SkillOut(CamelOut):
    id: int
    name: str
    percentage: int
    category: str
    order: int
