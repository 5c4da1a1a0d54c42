"""서비스 레이어 패키지 초기화 모듈입니다."""

from app.services import (
    user_service,
    auth_service,
    project_service,
    skill_service,
    category_service,
    blog_service,
    video_service,
    contact_service,
)
