"""공용 스키마 베이스(camelCase 직렬화)와 URL/이미지 참조 검증기입니다."""

from typing import List, Optional
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

UPLOAD_PREFIX = "/uploads/"


class CamelModel(BaseModel):
    """Serialized as camelCase; accepts either camelCase or snake_case input."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CamelOut(CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


def check_http_url(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    parsed = urlparse(value)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ValueError("Must be a valid http(s) URL")
    return value


def check_image_ref(value: str) -> str:
    """Image references are absolute URLs or paths returned by the upload store."""
    value = (value or "").strip()
    if value.startswith(UPLOAD_PREFIX) and ".." not in value and len(value) > len(UPLOAD_PREFIX):
        return value
    return check_http_url(value)


class MessageOut(BaseModel):
    message: str


class FieldErrorOut(BaseModel):
    field: str
    message: str


class ValidationErrorOut(BaseModel):
    detail: str
    errors: List[FieldErrorOut]
