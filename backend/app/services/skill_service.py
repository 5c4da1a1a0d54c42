"""Skill Service 도메인 서비스 레이어입니다. 비즈니스 규칙과 데이터 접근 흐름을 캡슐화합니다."""

import logging
from typing import Any, Dict, List, Optional, Union

from sqlalchemy.orm import Session
from app.models.skill import Skill
from app.schemas.skill import SkillCreate, SkillUpdate
from app.utils.validation import as_payload, validate_merged, validate_payload

logger = logging.getLogger(__name__)


def _ordered(query):
    return query.order_by(Skill.order.asc(), Skill.id.asc())


def get_skills(db: Session) -> List[Skill]:
    return _ordered(db.query(Skill)).all()


def get_skills_by_category(db: Session, category: str) -> List[Skill]:
    return _ordered(db.query(Skill).filter(Skill.category == category)).all()


def get_skill(db: Session, skill_id: int) -> Optional[Skill]:
    return db.query(Skill).filter(Skill.id == skill_id).first()


def create_skill(db: Session, data: Union[SkillCreate, Dict[str, Any]]) -> Skill:
    validated = validate_payload(SkillCreate, data)
    skill = Skill(**validated.model_dump())
    db.add(skill)
    db.commit()
    db.refresh(skill)
    logger.info("skill created id=%s name=%r", skill.id, skill.name)
    return skill


def update_skill(db: Session, skill_id: int, data: Union[SkillUpdate, Dict[str, Any]]) -> Optional[Skill]:
    skill = get_skill(db, skill_id)
    if not skill:
        return None
    changes = validate_merged(SkillCreate, skill, as_payload(data, partial=True))
    for k, v in changes.items():
        setattr(skill, k, v)
    db.commit()
    db.refresh(skill)
    return skill


def delete_skill(db: Session, skill_id: int) -> bool:
    skill = get_skill(db, skill_id)
    if not skill:
        return False
    db.delete(skill)
    db.commit()
    logger.info("skill deleted id=%s", skill_id)
    return True
