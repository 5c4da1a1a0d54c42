"""Project Service 도메인 서비스 레이어입니다. 비즈니스 규칙과 데이터 접근 흐름을 캡슐화합니다."""

import logging
from typing import Any, Dict, List, Optional, Union

from sqlalchemy.orm import Session
from app.models.project import Project
from app.schemas.project import ProjectCreate, ProjectUpdate
from app.utils.validation import as_payload, validate_merged, validate_payload

logger = logging.getLogger(__name__)


def _ordered(query):
    return query.order_by(Project.created_at.desc(), Project.id.desc())


def get_projects(db: Session) -> List[Project]:
    return _ordered(db.query(Project)).all()


def get_featured_projects(db: Session) -> List[Project]:
    return _ordered(db.query(Project).filter(Project.featured == True)).all()  # noqa: E712


def get_project(db: Session, project_id: int) -> Optional[Project]:
    return db.query(Project).filter(Project.id == project_id).first()


def create_project(db: Session, data: Union[ProjectCreate, Dict[str, Any]]) -> Project:
    validated = validate_payload(ProjectCreate, data)
    project = Project(**validated.model_dump())
    db.add(project)
    db.commit()
    db.refresh(project)
    logger.info("project created id=%s title=%r", project.id, project.title)
    return project


def update_project(
    db: Session,
    project_id: int,
    data: Union[ProjectUpdate, Dict[str, Any]],
) -> Optional[Project]:
    project = get_project(db, project_id)
    if not project:
        return None
    changes = validate_merged(ProjectCreate, project, as_payload(data, partial=True))
    for k, v in changes.items():
        setattr(project, k, v)
    db.commit()
    db.refresh(project)
    logger.info("project updated id=%s fields=%s", project.id, sorted(changes))
    return project


def delete_project(db: Session, project_id: int) -> bool:
    project = get_project(db, project_id)
    if not project:
        return False
    db.delete(project)
    db.commit()
    logger.info("project deleted id=%s", project_id)
    return True
