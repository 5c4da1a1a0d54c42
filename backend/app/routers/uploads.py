"""Uploads 기능 API 라우터입니다. 요청을 검증하고 서비스 레이어로 비즈니스 로직을 위임합니다."""

from fastapi import APIRouter, Depends, File, UploadFile, status

from app.middleware.auth_middleware import require_admin
from app.models.user import User
from app.schemas.upload import UploadedFileOut
from app.utils.helpers import save_upload

router = APIRouter(prefix="/api/admin/uploads", tags=["uploads"])


@router.post("/images", response_model=UploadedFileOut, status_code=status.HTTP_201_CREATED)
async def upload_image(
    image: UploadFile = File(...),
    current_user: User = Depends(require_admin),
):
    # Used by the rich-text editor to embed images inside blog content.
    return await save_upload(image, subfolder="editor_images")
