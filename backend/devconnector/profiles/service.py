"""Profile service: reads, atomic upsert, embedded experience/education edits."""

import logging
import uuid
from datetime import UTC, datetime
from uuid import UUID

from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.orm import Session, joinedload

from ..auth.models import User
from .models import SOCIAL_NETWORKS, Profile
from .schemas import EducationRequest, ExperienceRequest, ProfileRequest

logger = logging.getLogger(__name__)


class ProfileNotFound(Exception):
    """The account has no profile yet."""

    pass


class EntryNotFound(Exception):
    """No experience/education entry carries the requested id."""

    pass


def to_uuid(value: str) -> UUID | None:
    """Convert string to UUID, returning None on failure."""
    if not value:
        return None
    try:
        return UUID(value)
    except (ValueError, AttributeError):
        return None


# ── Field normalization ───────────────────────────────────────────────


def parse_skills(skills: str | list[str]) -> list[str]:
    """Split a comma-separated skills string into a trimmed, ordered list."""
    values = skills.split(",") if isinstance(skills, str) else skills
    return [s.strip() for s in values if s and s.strip()]


def build_profile_fields(body: ProfileRequest) -> dict:
    social = {}
    for network in SOCIAL_NETWORKS:
        link = getattr(body, network)
        if link:
            social[network] = link
    return {
        "company": body.company,
        "location": body.location,
        "website": body.website,
        "bio": body.bio,
        "skills": parse_skills(body.skills),
        "status": body.status,
        "githubusername": body.githubusername,
        "social": social,
    }


# ── Reads ─────────────────────────────────────────────────────────────


def list_profiles(db: Session) -> list[Profile]:
    return db.query(Profile).options(joinedload(Profile.user)).order_by(Profile.date).all()


def get_profile_for_user(db: Session, user_id: UUID) -> Profile | None:
    return db.query(Profile).options(joinedload(Profile.user)).filter(Profile.user_id == user_id).first()


def get_profile_by_user_id(db: Session, user_id: str) -> Profile | None:
    """Look up by a raw path parameter; malformed ids simply find nothing."""
    uid = to_uuid(user_id)
    if uid is None:
        return None
    return get_profile_for_user(db, uid)


# ── Writes ────────────────────────────────────────────────────────────


def _dialect_insert(db: Session):
    if db.get_bind().dialect.name == "postgresql":
        return postgresql.insert
    return sqlite.insert


def upsert_profile(db: Session, user_id: UUID, body: ProfileRequest) -> Profile:
    """Create the account's profile or overwrite its fields in one statement.

    Embedded experience/education lists and the creation date are only set
    on insert.
    """
    fields = build_profile_fields(body)
    insert = _dialect_insert(db)
    stmt = insert(Profile).values(
        id=uuid.uuid4(),
        user_id=user_id,
        experience=[],
        education=[],
        date=datetime.now(UTC),
        **fields,
    )
    stmt = stmt.on_conflict_do_update(index_elements=["user_id"], set_=fields)
    db.execute(stmt)

    profile = (
        db.query(Profile)
        .options(joinedload(Profile.user))
        .filter(Profile.user_id == user_id)
        .populate_existing()
        .one()
    )
    logger.info("Profile upserted for user %s", user_id)
    return profile


def _lock_profile(db: Session, user_id: UUID) -> Profile:
    """Load the profile row under a write lock for a read-modify-write cycle."""
    profile = (
        db.query(Profile)
        .filter(Profile.user_id == user_id)
        .populate_existing()
        .with_for_update()
        .first()
    )
    if profile is None:
        raise ProfileNotFound(str(user_id))
    return profile


def _prepend_entry(db: Session, user_id: UUID, field: str, entry: dict) -> Profile:
    profile = _lock_profile(db, user_id)
    entry = {"id": str(uuid.uuid4()), **entry}
    # Reassign so the JSON column is flagged dirty
    setattr(profile, field, [entry, *(getattr(profile, field) or [])])
    db.flush()
    return profile


def _remove_entry(db: Session, user_id: UUID, field: str, entry_id: str) -> Profile:
    profile = _lock_profile(db, user_id)
    entries = getattr(profile, field) or []
    remaining = [e for e in entries if e.get("id") != entry_id]
    if len(remaining) == len(entries):
        raise EntryNotFound(entry_id)
    setattr(profile, field, remaining)
    db.flush()
    return profile


def add_experience(db: Session, user_id: UUID, body: ExperienceRequest) -> Profile:
    return _prepend_entry(db, user_id, "experience", body.model_dump(mode="json", by_alias=True))


def remove_experience(db: Session, user_id: UUID, exp_id: str) -> Profile:
    return _remove_entry(db, user_id, "experience", exp_id)


def add_education(db: Session, user_id: UUID, body: EducationRequest) -> Profile:
    return _prepend_entry(db, user_id, "education", body.model_dump(mode="json", by_alias=True))


def remove_education(db: Session, user_id: UUID, edu_id: str) -> Profile:
    return _remove_entry(db, user_id, "education", edu_id)


def delete_account(db: Session, user: User) -> None:
    """Remove the account together with its profile and posts."""
    db.delete(user)
    db.flush()
    logger.info("Deleted account %s", user.id)
