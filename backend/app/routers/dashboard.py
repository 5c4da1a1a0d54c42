"""대시보드 집계 API 라우터입니다."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.database import get_db
from app.middleware.auth_middleware import require_admin
from app.models.blog import Blog
from app.models.category import Category
from app.models.contact import Contact
from app.models.project import Project
from app.models.skill import Skill
from app.models.user import User
from app.models.video import Video
from app.schemas.contact import ContactOut
from app.schemas.dashboard import DashboardOut

router = APIRouter(prefix="/api/admin/dashboard", tags=["dashboard"])

RECENT_CONTACT_LIMIT = 5


@router.get("", response_model=DashboardOut)
def get_dashboard(
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
):
    blogs = db.query(Blog).count()
    published_blogs = db.query(Blog).filter(Blog.published == True).count()  # noqa: E712
    recent_contacts = (
        db.query(Contact)
        .order_by(Contact.created_at.desc(), Contact.id.desc())
        .limit(RECENT_CONTACT_LIMIT)
        .all()
    )
    return {
        "counts": {
            "projects": db.query(Project).count(),
            "featured_projects": db.query(Project).filter(Project.featured == True).count(),  # noqa: E712
            "blogs": blogs,
            "published_blogs": published_blogs,
            "draft_blogs": blogs - published_blogs,
            "skills": db.query(Skill).count(),
            "categories": db.query(Category).count(),
            "videos": db.query(Video).count(),
            "contacts": db.query(Contact).count(),
            "unread_contacts": db.query(Contact).filter(Contact.read == False).count(),  # noqa: E712
        },
        "recent_contacts": [ContactOut.model_validate(row) for row in recent_contacts],
    }
