"""Videos 기능 API 라우터입니다. 요청을 검증하고 서비스 레이어로 비즈니스 로직을 위임합니다."""

from typing import List, Optional

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from app.database import get_db
from app.schemas.video import VideoInput, VideoOut, VideoUpdate
from app.schemas.common import MessageOut
from app.services import video_service
from app.middleware.auth_middleware import require_admin
from app.models.user import User
from app.utils.errors import NotFoundError
from app.utils.helpers import query_flag

router = APIRouter(tags=["videos"])


@router.get("/api/videos", response_model=List[VideoOut])
def list_videos(featured: Optional[str] = None, db: Session = Depends(get_db)):
    if query_flag(featured):
        return video_service.get_featured_videos(db)
    return video_service.get_videos(db)


@router.get("/api/videos/{video_pk}", response_model=VideoOut)
def get_video(video_pk: int, db: Session = Depends(get_db)):
    video = video_service.get_video(db, video_pk)
    if not video:
        raise NotFoundError("Video")
    return video


@router.post("/api/admin/videos", response_model=VideoOut, status_code=status.HTTP_201_CREATED)
def create_video(
    data: VideoInput,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
):
    return video_service.create_video(db, data)


@router.put("/api/admin/videos/{video_pk}", response_model=VideoOut)
def update_video(
    video_pk: int,
    data: VideoUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
):
    video = video_service.update_video(db, video_pk, data)
    if not video:
        raise NotFoundError("Video")
    return video


@router.delete("/api/admin/videos/{video_pk}", response_model=MessageOut)
def delete_video(
    video_pk: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
):
    if not video_service.delete_video(db, video_pk):
        raise NotFoundError("Video")
    return {"message": "Video deleted successfully"}
