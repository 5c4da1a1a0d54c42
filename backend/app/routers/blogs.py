"""Blogs 기능 API 라우터입니다. 요청을 검증하고 서비스 레이어로 비즈니스 로직을 위임합니다."""

from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, Request, UploadFile, status
from sqlalchemy.orm import Session
from app.database import get_db
from app.schemas.blog import BlogOut
from app.schemas.common import MessageOut
from app.services import blog_service
from app.middleware.auth_middleware import get_optional_user, require_admin
from app.models.user import User
from app.utils.errors import NotFoundError, ValidationError
from app.utils.helpers import blank_form_fields, parse_form_bool, query_flag, remove_upload, save_upload, slugify
from app.utils.permissions import can_view_blog, is_admin

router = APIRouter(tags=["blogs"])


def _parse_category_id(value: Optional[str]) -> Optional[int]:
    if value is None or not value.strip() or value.strip().lower() in ("none", "null"):
        return None
    try:
        return int(value)
    except ValueError:
        raise ValidationError.for_field("categoryId", "Must be an integer")


@router.get("/api/blogs", response_model=List[BlogOut])
def list_blogs(
    published: Optional[str] = None,
    db: Session = Depends(get_db),
    current_user: Optional[User] = Depends(get_optional_user),
):
    if not is_admin(current_user):
        return blog_service.get_blogs(db, published=True)
    return blog_service.get_blogs(db, published=query_flag(published))


@router.get("/api/blogs/featured", response_model=List[BlogOut])
def list_featured_blogs(db: Session = Depends(get_db)):
    return blog_service.get_featured_blogs(db)


@router.get("/api/blogs/slug/{slug}", response_model=BlogOut)
def get_blog_by_slug(
    slug: str,
    db: Session = Depends(get_db),
    current_user: Optional[User] = Depends(get_optional_user),
):
    blog = blog_service.get_blog_by_slug(db, slug)
    # Drafts answer 404 to non-admins so their existence does not leak.
    if not blog or not can_view_blog(blog, current_user):
        raise NotFoundError("Blog post")
    return blog


@router.get("/api/blogs/{blog_id}", response_model=BlogOut)
def get_blog(
    blog_id: int,
    db: Session = Depends(get_db),
    current_user: Optional[User] = Depends(get_optional_user),
):
    blog = blog_service.get_blog(db, blog_id)
    if not blog or not can_view_blog(blog, current_user):
        raise NotFoundError("Blog post")
    return blog


@router.post("/api/admin/blogs", response_model=BlogOut, status_code=status.HTTP_201_CREATED)
async def create_blog(
    title: str = Form(""),
    slug: Optional[str] = Form(None),
    content: str = Form(""),
    excerpt: str = Form(""),
    category_id: Optional[str] = Form(None, alias="categoryId"),
    published: Optional[str] = Form(None),
    image: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
):
    if image is None or not image.filename:
        raise ValidationError.for_field("image", "Image upload is required")
    payload = {
        "title": title,
        "slug": (slug or "").strip() or slugify(title),
        "content": content,
        "excerpt": excerpt,
        "category_id": _parse_category_id(category_id),
        "author_id": current_user.id,
        "published": bool(parse_form_bool(published, "published")),
    }
    uploaded = await save_upload(image)
    payload["image_url"] = uploaded["url"]
    try:
        return blog_service.create_blog(db, payload)
    except ValidationError:
        remove_upload(uploaded["url"])
        raise


@router.put("/api/admin/blogs/{blog_id}", response_model=BlogOut)
async def update_blog(
    blog_id: int,
    request: Request,
    title: Optional[str] = Form(None),
    slug: Optional[str] = Form(None),
    content: Optional[str] = Form(None),
    excerpt: Optional[str] = Form(None),
    category_id: Optional[str] = Form(None, alias="categoryId"),
    published: Optional[str] = Form(None),
    image: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
):
    existing = blog_service.get_blog(db, blog_id)
    if not existing:
        raise NotFoundError("Blog post")

    cleared = await blank_form_fields(request, "categoryId")
    patch = {}
    if title is not None:
        patch["title"] = title
    if slug is not None:
        patch["slug"] = slug.strip()
    if content is not None:
        patch["content"] = content
    if excerpt is not None:
        patch["excerpt"] = excerpt
    if category_id is not None or "categoryId" in cleared:
        patch["category_id"] = _parse_category_id(category_id)
    if published is not None:
        patch["published"] = parse_form_bool(published, "published")

    uploaded = None
    previous_image = existing.image_url
    if image is not None and image.filename:
        uploaded = await save_upload(image)
        patch["image_url"] = uploaded["url"]

    try:
        blog = blog_service.update_blog(db, blog_id, patch)
    except ValidationError:
        if uploaded:
            remove_upload(uploaded["url"])
        raise
    if blog is None:
        raise NotFoundError("Blog post")
    if uploaded and previous_image != blog.image_url:
        remove_upload(previous_image)
    return blog


@router.delete("/api/admin/blogs/{blog_id}", response_model=MessageOut)
def delete_blog(
    blog_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
):
    if not blog_service.delete_blog(db, blog_id):
        raise NotFoundError("Blog post")
    return {"message": "Blog post deleted successfully"}
