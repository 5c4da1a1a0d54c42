"""관리자 대시보드 집계 응답 스키마입니다."""

from typing import List

from app.schemas.common import CamelModel
from app.schemas.contact import ContactOut


class DashboardCounts(CamelModel):
    projects: int
    featured_projects: int
    blogs: int
    published_blogs: int
    draft_blogs: int
    skills: int
    categories: int
    videos: int
    contacts: int
    unread_contacts: int


class DashboardOut(CamelModel):
    counts: DashboardCounts
    recent_contacts: List[ContactOut]
