"""업로드된 이미지 참조 응답을 위한 Pydantic 스키마입니다."""

from typing import Optional

from app.schemas.common import CamelModel


class UploadedFileOut(CamelModel):
    """Reference to a stored image; ``url`` is what entities keep in ``imageUrl``."""

    filename: str
    url: str
    size: int
    content_type: Optional[str] = None
