"""Pydantic schemas for user and token API."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field


class UserCreate(BaseModel):
    """Schema for registering a user."""

    sn: str
    password: str = Field(..., alias="pass")


class UserResponse(BaseModel):
    """Schema for User response."""

    id: UUID
    sn: str
    date: datetime


class UserDetailResponse(BaseModel):
    data: UserResponse


class TokenResponse(BaseModel):
    """Schema for a freshly issued token. The key is shown only once."""

    id: UUID
    key: str
    user: UUID
    type: str
    date: datetime


class TokenDetailResponse(BaseModel):
    data: TokenResponse
