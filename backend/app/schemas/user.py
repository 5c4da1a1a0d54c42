"""User 요청/응답 계약을 위한 Pydantic 스키마입니다."""

from pydantic import BaseModel, EmailStr, Field
from datetime import datetime

from app.schemas.common import CamelModel, CamelOut


class UserCreate(CamelModel):
    username: str = Field(min_length=3, max_length=50)
    password: str = Field(min_length=6, max_length=128)
    name: str = Field(min_length=2, max_length=100)
    email: EmailStr
    role: str = Field(default="user", pattern="^(user|admin)$")


class RegisterRequest(CamelModel):
    username: str
    password: str
    name: str
    email: str


class LoginRequest(BaseModel):
    username: str
    password: str


class UserOut(CamelOut):
    id: int
    username: str
    name: str
    email: str
    role: str
    created_at: datetime


class TokenResponse(CamelModel):
    access_token: str
    token_type: str = "bearer"
    user: UserOut
