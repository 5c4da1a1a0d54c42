"""스키마 검증 결과를 필드 단위 오류 목록으로 변환하는 공용 유틸리티입니다."""

import re
from typing import Any, Dict, List, Optional, Type, TypeVar, Union

import pydantic
from pydantic import BaseModel

from app.utils.errors import ValidationError

SchemaT = TypeVar("SchemaT", bound=BaseModel)


def _wire_name(name: str, schema: Optional[Type[BaseModel]] = None) -> str:
    """Field name as clients send it: the schema alias, else camelCase."""
    if schema is not None and name in schema.model_fields:
        return schema.model_fields[name].alias or name
    return re.sub(r"_([a-z0-9])", lambda m: m.group(1).upper(), name)


def field_errors(exc: pydantic.ValidationError, schema: Optional[Type[BaseModel]] = None) -> List[Dict[str, str]]:
    errors = []
    for item in exc.errors():
        loc = [str(part) for part in item.get("loc", ()) if part not in ("body",)]
        if loc:
            loc[0] = _wire_name(loc[0], schema)
        errors.append({"field": ".".join(loc) or "__root__", "message": item.get("msg", "Invalid value")})
    return errors


def as_payload(data: Union[BaseModel, Dict[str, Any]], partial: bool = False) -> Dict[str, Any]:
    if isinstance(data, BaseModel):
        return data.model_dump(exclude_unset=partial)
    return dict(data)


def validate_payload(schema: Type[SchemaT], data: Union[BaseModel, Dict[str, Any]]) -> SchemaT:
    data = as_payload(data)
    try:
        return schema.model_validate(data)
    except pydantic.ValidationError as exc:
        raise ValidationError(field_errors(exc, schema))


def snapshot(schema: Type[BaseModel], record: Any) -> Dict[str, Any]:
    """Current values of ``record`` for every field of the insert schema."""
    return {name: getattr(record, name) for name in schema.model_fields}


def validate_merged(schema: Type[SchemaT], record: Any, patch: Dict[str, Any]) -> Dict[str, Any]:
    """Validate ``record`` with ``patch`` applied and return the normalized patched values.

    The full merged record is checked so a partial update can never leave the
    row outside the insert schema; only the patched keys are returned.
    """
    patch = {key: value for key, value in patch.items() if key in schema.model_fields}
    merged = snapshot(schema, record)
    merged.update(patch)
    validated = validate_payload(schema, merged)
    return {key: getattr(validated, key) for key in patch}
