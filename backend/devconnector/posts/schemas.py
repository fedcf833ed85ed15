"""Post request/response schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field, field_validator


class PostCreateRequest(BaseModel):
    text: str = Field(..., min_length=1, max_length=10_000)

    @field_validator("text")
    @classmethod
    def text_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("text is blank")
        return v


class PostResponse(BaseModel):
    id: UUID
    user: UUID = Field(validation_alias="user_id")
    text: str
    name: str = ""
    avatar: str = ""
    date: datetime | None = None

    model_config = {"from_attributes": True}
