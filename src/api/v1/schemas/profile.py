"""Pydantic schemas for Profile API."""

from pydantic import BaseModel, ConfigDict


class ProfileUpsert(BaseModel):
    """Schema for creating or updating a profile.

    A positive ``id`` updates that profile and only the fields sent are
    written; anything else creates a new one from all three fields.
    """

    id: int | None = None
    username: str | None = None
    email: str | None = None
    phone: str | None = None


class ProfileResponse(BaseModel):
    """Schema for Profile response."""

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "username": "alice",
                "email": "alice@example.com",
                "phone": "13800000000",
            }
        },
    )

    id: int
    username: str
    email: str
    phone: str
