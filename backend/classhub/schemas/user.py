from __future__ import annotations

from datetime import datetime

from pydantic import EmailStr, Field

from classhub.schemas.base import ORMModel


class UserCreate(ORMModel):
    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    password: str = Field(..., min_length=6, max_length=128)


class UserRead(ORMModel):
    id: int
    name: str
    email: str
    created_at: datetime


class LoginPayload(ORMModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


class TokenResponse(ORMModel):
    access_token: str
    token_type: str = "bearer"
    user: UserRead
