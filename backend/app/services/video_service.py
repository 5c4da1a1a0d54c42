"""Video Service 도메인 서비스 레이어입니다. 비즈니스 규칙과 데이터 접근 흐름을 캡슐화합니다."""

import logging
from typing import Any, Dict, List, Optional, Union

from sqlalchemy.orm import Session
from app.config import settings
from app.models.video import Video
from app.schemas.video import VideoCreate, VideoInput, VideoUpdate
from app.utils.validation import as_payload, validate_merged, validate_payload

logger = logging.getLogger(__name__)


def youtube_thumbnail(video_id: str) -> str:
    return settings.YOUTUBE_THUMBNAIL_URL.format(video_id=video_id.strip())


def _ordered(query):
    return query.order_by(Video.order.asc(), Video.id.asc())


def get_videos(db: Session) -> List[Video]:
    return _ordered(db.query(Video)).all()


def get_featured_videos(db: Session) -> List[Video]:
    return _ordered(db.query(Video).filter(Video.featured == True)).all()  # noqa: E712


def get_video(db: Session, video_id: int) -> Optional[Video]:
    return db.query(Video).filter(Video.id == video_id).first()


def create_video(db: Session, data: Union[VideoInput, VideoCreate, Dict[str, Any]]) -> Video:
    payload = as_payload(data)
    if not payload.get("thumbnail_url") and payload.get("video_id"):
        payload["thumbnail_url"] = youtube_thumbnail(payload["video_id"])
    validated = validate_payload(VideoCreate, payload)
    video = Video(**validated.model_dump())
    db.add(video)
    db.commit()
    db.refresh(video)
    logger.info("video created id=%s video_id=%s", video.id, video.video_id)
    return video


def update_video(db: Session, video_pk: int, data: Union[VideoUpdate, Dict[str, Any]]) -> Optional[Video]:
    video = get_video(db, video_pk)
    if not video:
        return None
    patch = as_payload(data, partial=True)
    new_video_id = patch.get("video_id")
    if new_video_id and new_video_id != video.video_id and not patch.get("thumbnail_url"):
        patch["thumbnail_url"] = youtube_thumbnail(new_video_id)
    elif "thumbnail_url" in patch and not patch["thumbnail_url"]:
        patch.pop("thumbnail_url")
    changes = validate_merged(VideoCreate, video, patch)
    for k, v in changes.items():
        setattr(video, k, v)
    db.commit()
    db.refresh(video)
    return video


def delete_video(db: Session, video_pk: int) -> bool:
    video = get_video(db, video_pk)
    if not video:
        return False
    db.delete(video)
    db.commit()
    logger.info("video deleted id=%s", video_pk)
    return True
