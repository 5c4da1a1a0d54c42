import json
import os
import re
import unicodedata
import uuid
from datetime import datetime, timezone
from typing import List, Optional

from fastapi import Request, UploadFile
from app.config import settings
from app.utils.errors import ValidationError

UPLOAD_URL_PREFIX = "/uploads/"
IMAGE_SUBFOLDER = "images"

_TRUE_VALUES = {"true", "1", "on", "yes"}
_FALSE_VALUES = {"false", "0", "off", "no", ""}


def utcnow() -> datetime:
    # naive UTC, matching what SQLite hands back
    return datetime.now(timezone.utc).replace(tzinfo=None)


def slugify(text: str) -> str:
    normalized = unicodedata.normalize("NFKD", text or "").encode("ascii", "ignore").decode("ascii")
    normalized = re.sub(r"[^a-zA-Z0-9\s_-]", "", normalized).strip().lower()
    return re.sub(r"[\s_-]+", "-", normalized).strip("-")


async def blank_form_fields(request: Request, *names: str) -> set:
    """Form keys that were submitted with an empty value.

    FastAPI hands ``""`` to ``Form`` parameters as their default, so clearing
    an optional field has to be read from the raw form.
    """
    form = await request.form()
    return {name for name in names if name in form and form.get(name) == ""}


def parse_form_bool(value: Optional[str], field: str) -> Optional[bool]:
    if value is None:
        return None
    text = value.strip().lower()
    if text in _TRUE_VALUES:
        return True
    if text in _FALSE_VALUES:
        return False
    raise ValidationError.for_field(field, "Must be a boolean (true/false)")


def query_flag(value: Optional[str]) -> Optional[bool]:
    """Lenient boolean for query filters; blank or unrecognized values mean no filter."""
    if value is None:
        return None
    text = value.strip().lower()
    if not text:
        return None
    if text in _TRUE_VALUES:
        return True
    if text in _FALSE_VALUES:
        return False
    return None


def parse_form_list(value: Optional[str], field: str) -> Optional[List[str]]:
    """Accept a JSON array string or a comma-separated list from a multipart form."""
    if value is None:
        return None
    text = value.strip()
    if text.startswith("["):
        try:
            parsed = json.loads(text)
        except json.JSONDecodeError:
            raise ValidationError.for_field(field, "Must be a JSON array of strings")
        if not isinstance(parsed, list) or not all(isinstance(item, str) for item in parsed):
            raise ValidationError.for_field(field, "Must be a JSON array of strings")
        return [item.strip() for item in parsed if item.strip()]
    return [item.strip() for item in text.split(",") if item.strip()]


def validate_image(file: UploadFile) -> str:
    ext = file.filename.rsplit(".", 1)[-1].lower() if file.filename and "." in file.filename else ""
    if ext not in settings.ALLOWED_IMAGE_EXTENSIONS:
        raise ValidationError.for_field(
            "image",
            f"Invalid file type. Allowed: {', '.join(settings.ALLOWED_IMAGE_EXTENSIONS)}",
        )
    if file.content_type and file.content_type.lower() not in settings.ALLOWED_IMAGE_CONTENT_TYPES:
        raise ValidationError.for_field("image", f"Invalid content type '{file.content_type}'")
    return ext


async def save_upload(file: UploadFile, subfolder: str = IMAGE_SUBFOLDER) -> dict:
    ext = validate_image(file)
    # one byte past the limit is enough to detect an oversized file
    content = await file.read(settings.MAX_UPLOAD_SIZE + 1)
    if len(content) > settings.MAX_UPLOAD_SIZE:
        limit_mb = settings.MAX_UPLOAD_SIZE // (1024 * 1024)
        raise ValidationError.for_field("image", f"File exceeds {limit_mb} MB limit")
    if not content:
        raise ValidationError.for_field("image", "File is empty")

    folder = os.path.join(settings.UPLOAD_DIR, subfolder)
    os.makedirs(folder, exist_ok=True)

    filename = f"{uuid.uuid4().hex}.{ext}"
    path = os.path.join(folder, filename)

    with open(path, "wb") as f:
        f.write(content)

    return {
        "filename": file.filename,
        "url": f"{UPLOAD_URL_PREFIX}{subfolder}/{filename}".replace("\\", "/"),
        "size": len(content),
        "content_type": file.content_type,
    }


def remove_upload(url: Optional[str]) -> bool:
    if not url or not url.startswith(UPLOAD_URL_PREFIX):
        return False
    rel_path = url[len(UPLOAD_URL_PREFIX):].replace("/", os.sep)
    abs_path = os.path.join(settings.UPLOAD_DIR, rel_path)
    if os.path.isfile(abs_path):
        os.remove(abs_path)
        return True
    return False
