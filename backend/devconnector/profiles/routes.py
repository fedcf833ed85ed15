"""Profile routes."""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from ..audit.service import audit
from ..auth.models import User
from ..database import get_db
from ..dependencies import get_cache, get_current_user
from ..integrations.cache import CacheService
from ..integrations.github import fetch_github_repos
from .models import Profile
from .schemas import EducationRequest, ExperienceRequest, ProfileRequest, ProfileResponse
from .service import (
    EntryNotFound,
    ProfileNotFound,
    add_education,
    add_experience,
    delete_account,
    get_profile_by_user_id,
    get_profile_for_user,
    list_profiles,
    remove_education,
    remove_experience,
    upsert_profile,
)

router = APIRouter(prefix="/profile", tags=["profile"])

NO_PROFILE = "There is no profile for this user"


def _profile_json(profile: Profile) -> dict:
    return ProfileResponse.model_validate(profile).model_dump(mode="json", by_alias=True)


def _msg(message: str, status_code: int = 400) -> JSONResponse:
    return JSONResponse({"msg": message}, status_code=status_code)


@router.get("")
def all_profiles(db: Session = Depends(get_db)):
    return JSONResponse([_profile_json(p) for p in list_profiles(db)])


@router.get("/me")
def my_profile(
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    profile = get_profile_for_user(db, user.id)
    if not profile:
        return _msg(NO_PROFILE)
    return JSONResponse(_profile_json(profile))


@router.get("/user/{user_id}")
def profile_by_user(user_id: str, db: Session = Depends(get_db)):
    profile = get_profile_by_user_id(db, user_id)
    if not profile:
        return _msg("Profile not found")
    return JSONResponse(_profile_json(profile))


@router.get("/github/{username}")
def github_repos(username: str, cache: CacheService = Depends(get_cache)):
    repos = fetch_github_repos(username, cache)
    if repos is None:
        return _msg("No Github profile found", status_code=404)
    return JSONResponse(repos)


@router.post("")
def save_profile(
    request: Request,
    body: ProfileRequest,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    profile = upsert_profile(db, user.id, body)
    audit(db, request, "profile_save", f"status={profile.status}", user_id=user.id)
    db.commit()
    return JSONResponse(_profile_json(profile))


@router.put("/experience")
def add_experience_route(
    body: ExperienceRequest,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    try:
        profile = add_experience(db, user.id, body)
    except ProfileNotFound:
        db.rollback()
        return _msg(NO_PROFILE)
    db.commit()
    return JSONResponse(_profile_json(profile))


@router.delete("/experience/{exp_id}")
def remove_experience_route(
    exp_id: str,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    try:
        profile = remove_experience(db, user.id, exp_id)
    except ProfileNotFound:
        db.rollback()
        return _msg(NO_PROFILE)
    except EntryNotFound:
        db.rollback()
        return _msg("Experience not found")
    db.commit()
    return JSONResponse(_profile_json(profile))


@router.put("/education")
def add_education_route(
    body: EducationRequest,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    try:
        profile = add_education(db, user.id, body)
    except ProfileNotFound:
        db.rollback()
        return _msg(NO_PROFILE)
    db.commit()
    return JSONResponse(_profile_json(profile))


@router.delete("/education/{edu_id}")
def remove_education_route(
    edu_id: str,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    try:
        profile = remove_education(db, user.id, edu_id)
    except ProfileNotFound:
        db.rollback()
        return _msg(NO_PROFILE)
    except EntryNotFound:
        db.rollback()
        return _msg("Education not found")
    db.commit()
    return JSONResponse(_profile_json(profile))


@router.delete("")
def remove_account(
    request: Request,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    audit(db, request, "account_delete", f"email={user.email}")
    delete_account(db, user)
    db.commit()
    return JSONResponse({"msg": "User deleted"})
