"""Projects 기능 API 라우터입니다. 요청을 검증하고 서비스 레이어로 비즈니스 로직을 위임합니다."""

from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, Request, UploadFile, status
from sqlalchemy.orm import Session
from app.database import get_db
from app.schemas.project import ProjectOut
from app.schemas.common import MessageOut
from app.services import project_service
from app.middleware.auth_middleware import require_admin
from app.models.user import User
from app.utils.errors import NotFoundError, ValidationError
from app.utils.helpers import blank_form_fields, parse_form_bool, parse_form_list, query_flag, remove_upload, save_upload

router = APIRouter(tags=["projects"])


@router.get("/api/projects", response_model=List[ProjectOut])
def list_projects(featured: Optional[str] = None, db: Session = Depends(get_db)):
    if query_flag(featured):
        return project_service.get_featured_projects(db)
    return project_service.get_projects(db)


@router.get("/api/projects/{project_id}", response_model=ProjectOut)
def get_project(project_id: int, db: Session = Depends(get_db)):
    project = project_service.get_project(db, project_id)
    if not project:
        raise NotFoundError("Project")
    return project


@router.post("/api/admin/projects", response_model=ProjectOut, status_code=status.HTTP_201_CREATED)
async def create_project(
    title: str = Form(""),
    description: str = Form(""),
    technologies: Optional[str] = Form(None),
    project_url: Optional[str] = Form(None, alias="projectUrl"),
    github_url: Optional[str] = Form(None, alias="githubUrl"),
    featured: Optional[str] = Form(None),
    image: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
):
    if image is None or not image.filename:
        raise ValidationError.for_field("image", "Image upload is required")
    payload = {
        "title": title,
        "description": description,
        "technologies": parse_form_list(technologies, "technologies") or [],
        "project_url": project_url or None,
        "github_url": github_url or None,
        "featured": bool(parse_form_bool(featured, "featured")),
        "author_id": current_user.id,
    }
    uploaded = await save_upload(image)
    payload["image_url"] = uploaded["url"]
    try:
        return project_service.create_project(db, payload)
    except ValidationError:
        remove_upload(uploaded["url"])
        raise


@router.put("/api/admin/projects/{project_id}", response_model=ProjectOut)
async def update_project(
    project_id: int,
    request: Request,
    title: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    technologies: Optional[str] = Form(None),
    project_url: Optional[str] = Form(None, alias="projectUrl"),
    github_url: Optional[str] = Form(None, alias="githubUrl"),
    featured: Optional[str] = Form(None),
    image: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
):
    existing = project_service.get_project(db, project_id)
    if not existing:
        raise NotFoundError("Project")

    cleared = await blank_form_fields(request, "projectUrl", "githubUrl")
    patch = {}
    if title is not None:
        patch["title"] = title
    if description is not None:
        patch["description"] = description
    if technologies is not None:
        patch["technologies"] = parse_form_list(technologies, "technologies")
    if project_url is not None or "projectUrl" in cleared:
        patch["project_url"] = project_url or None
    if github_url is not None or "githubUrl" in cleared:
        patch["github_url"] = github_url or None
    if featured is not None:
        patch["featured"] = parse_form_bool(featured, "featured")

    uploaded = None
    previous_image = existing.image_url
    if image is not None and image.filename:
        uploaded = await save_upload(image)
        patch["image_url"] = uploaded["url"]

    try:
        project = project_service.update_project(db, project_id, patch)
    except ValidationError:
        if uploaded:
            remove_upload(uploaded["url"])
        raise
    if project is None:
        raise NotFoundError("Project")
    if uploaded and previous_image != project.image_url:
        remove_upload(previous_image)
    return project


@router.delete("/api/admin/projects/{project_id}", response_model=MessageOut)
def delete_project(
    project_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
):
    if not project_service.delete_project(db, project_id):
        raise NotFoundError("Project")
    return {"message": "Project deleted successfully"}
