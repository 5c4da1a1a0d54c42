"""API 오류 분류(검증/권한/미존재/예기치 않은 오류)를 HTTPException 하위 클래스로 정의합니다."""

from typing import Dict, List, Optional

from fastapi import HTTPException, status


class ValidationError(HTTPException):
    """Client-fixable schema or invariant violation with a field-level report."""

    def __init__(self, errors: List[Dict[str, str]], message: str = "Validation error"):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=message)
        self.errors = errors

    @classmethod
    def for_field(cls, field: str, message: str) -> "ValidationError":
        return cls([{"field": field, "message": message}])


class ForbiddenError(HTTPException):
    # Deliberately opaque: never says which check failed.
    def __init__(self):
        super().__init__(status_code=status.HTTP_403_FORBIDDEN, detail="Forbidden")


class NotFoundError(HTTPException):
    def __init__(self, resource: str = "Resource"):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=f"{resource} not found")


class UnexpectedError(HTTPException):
    def __init__(self, detail: Optional[str] = None):
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=detail or "Internal server error",
        )
