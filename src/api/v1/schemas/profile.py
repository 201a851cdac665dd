"""Pydantic schemas for Profile API."""

from pydantic import BaseModel, ConfigDict


class ProfileWrite(BaseModel):
    """Schema for creating or replacing a Profile.

    Field formats are checked against the configured rules by the
    domain layer, so only presence is enforced here.
    """

    name: str
    text: str
    sn: str


class ProfileResponse(BaseModel):
    """Schema for Profile response. ``user`` is only set for the owner."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "456e4567-e89b-12d3-a456-426614174000",
                "user": None,
                "name": "Alice",
                "text": "Hello *world*",
                "mdtext": "Hello *world*",
                "date": "2026-01-28T10:00:00.000Z",
                "update": "2026-01-28T10:00:00.000Z",
                "sn": "alice",
            }
        },
    )

    id: str
    user: str | None = None
    name: str
    text: str
    mdtext: str
    date: str
    update: str
    sn: str


class ProfileListResponse(BaseModel):
    """Schema for list of Profiles."""

    data: list[ProfileResponse]


class ProfileDetailResponse(BaseModel):
    """Schema for single Profile."""

    data: ProfileResponse

