"""Profile request/response schemas."""

from datetime import date, datetime
from urllib.parse import urlsplit, urlunsplit
from uuid import UUID

from pydantic import BaseModel, Field, field_validator


def normalize_url(value: str) -> str:
    """Absolute HTTPS form of a user-entered URL; blank input stays blank.

    Raises ValueError when the input has no usable host.
    """
    value = (value or "").strip()
    if not value:
        return ""
    if value.startswith("//"):
        value = "https:" + value
    elif "://" not in value:
        value = "https://" + value

    parts = urlsplit(value)
    host = parts.netloc.lower()
    if host.startswith("www."):
        host = host[4:]
    if not host or not parts.hostname:
        raise ValueError(f"no host in {value!r}")
    path = parts.path.rstrip("/")
    return urlunsplit(("https", host, path, parts.query, ""))


class ProfileRequest(BaseModel):
    company: str = Field("", max_length=255)
    location: str = Field("", max_length=255)
    website: str = Field("", max_length=500)
    bio: str = ""
    skills: str | list[str]
    status: str = Field(..., min_length=1, max_length=255)
    githubusername: str = Field("", max_length=100)
    youtube: str = Field("", max_length=500)
    twitter: str = Field("", max_length=500)
    instagram: str = Field("", max_length=500)
    linkedin: str = Field("", max_length=500)
    facebook: str = Field("", max_length=500)

    @field_validator("status")
    @classmethod
    def status_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("status is blank")
        return v.strip()

    @field_validator("skills")
    @classmethod
    def skills_not_empty(cls, v: str | list[str]) -> str | list[str]:
        values = v.split(",") if isinstance(v, str) else v
        if not any(s.strip() for s in values):
            raise ValueError("skills is empty")
        return v

    @field_validator("website", "youtube", "twitter", "instagram", "linkedin", "facebook")
    @classmethod
    def normalize_links(cls, v: str) -> str:
        return normalize_url(v)


class _EntryRequest(BaseModel):
    from_: date = Field(..., alias="from")
    to: date | None = None
    current: bool = False
    description: str = ""

    model_config = {"populate_by_name": True}

    @field_validator("to", mode="before")
    @classmethod
    def blank_to_none(cls, v: object) -> object:
        if isinstance(v, str) and not v.strip():
            return None
        return v


class ExperienceRequest(_EntryRequest):
    title: str = Field(..., min_length=1, max_length=255)
    company: str = Field(..., min_length=1, max_length=255)
    location: str = Field("", max_length=255)


class EducationRequest(_EntryRequest):
    school: str = Field(..., min_length=1, max_length=255)
    degree: str = Field(..., min_length=1, max_length=255)
    fieldofstudy: str = Field(..., min_length=1, max_length=255)


# ── Responses ─────────────────────────────────────────────────────────


class UserSummary(BaseModel):
    id: UUID
    name: str
    avatar: str = ""

    model_config = {"from_attributes": True}


class ExperienceEntry(BaseModel):
    id: str
    title: str
    company: str
    location: str = ""
    from_: date | None = Field(None, alias="from")
    to: date | None = None
    current: bool = False
    description: str = ""

    model_config = {"populate_by_name": True}


class EducationEntry(BaseModel):
    id: str
    school: str
    degree: str
    fieldofstudy: str
    from_: date | None = Field(None, alias="from")
    to: date | None = None
    current: bool = False
    description: str = ""

    model_config = {"populate_by_name": True}


class ProfileResponse(BaseModel):
    id: UUID
    user: UserSummary
    company: str | None = ""
    location: str | None = ""
    website: str | None = ""
    bio: str | None = ""
    skills: list[str] = Field(default_factory=list)
    status: str
    githubusername: str | None = ""
    social: dict[str, str] = Field(default_factory=dict)
    experience: list[ExperienceEntry] = Field(default_factory=list)
    education: list[EducationEntry] = Field(default_factory=list)
    date: datetime | None = None

    model_config = {"from_attributes": True}
