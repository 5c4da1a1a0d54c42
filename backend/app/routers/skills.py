"""Skills 기능 API 라우터입니다. 요청을 검증하고 서비스 레이어로 비즈니스 로직을 위임합니다."""

from typing import List, Optional

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from app.database import get_db
from app.schemas.skill import SkillCreate, SkillOut, SkillUpdate
from app.schemas.common import MessageOut
from app.services import skill_service
from app.middleware.auth_middleware import require_admin
from app.models.user import User
from app.utils.errors import NotFoundError

router = APIRouter(tags=["skills"])


@router.get("/api/skills", response_model=List[SkillOut])
def list_skills(category: Optional[str] = None, db: Session = Depends(get_db)):
    if category:
        return skill_service.get_skills_by_category(db, category)
    return skill_service.get_skills(db)


@router.get("/api/skills/{skill_id}", response_model=SkillOut)
def get_skill(skill_id: int, db: Session = Depends(get_db)):
    skill = skill_service.get_skill(db, skill_id)
    if not skill:
        raise NotFoundError("Skill")
    return skill


@router.post("/api/admin/skills", response_model=SkillOut, status_code=status.HTTP_201_CREATED)
def create_skill(
    data: SkillCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
):
    return skill_service.create_skill(db, data)


@router.put("/api/admin/skills/{skill_id}", response_model=SkillOut)
def update_skill(
    skill_id: int,
    data: SkillUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
):
    skill = skill_service.update_skill(db, skill_id, data)
    if not skill:
        raise NotFoundError("Skill")
    return skill


@router.delete("/api/admin/skills/{skill_id}", response_model=MessageOut)
def delete_skill(
    skill_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
):
    if not skill_service.delete_skill(db, skill_id):
        raise NotFoundError("Skill")
    return {"message": "Skill deleted successfully"}
