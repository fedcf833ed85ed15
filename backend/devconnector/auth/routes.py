"""Account routes: registration, login, current account."""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from ..audit.service import audit
from ..config import settings
from ..database import get_db
from ..dependencies import get_current_user
from ..rate_limit import limiter
from .models import User
from .schemas import LoginRequest, RegisterRequest, TokenResponse, UserResponse
from .service import authenticate_user, register_user
from .tokens import create_access_token

router = APIRouter(tags=["auth"])


@router.get("/auth")
def current_account(user: User = Depends(get_current_user)):
    return JSONResponse(UserResponse.model_validate(user).model_dump(mode="json"))


@router.post("/auth")
@limiter.limit(settings.rate_limit_auth)
def login(request: Request, body: LoginRequest, db: Session = Depends(get_db)):
    user = authenticate_user(db, body.email, body.password)
    if not user:
        audit(db, request, "login_failed", f"email={body.email}")
        db.commit()
        return JSONResponse({"errors": [{"msg": "Invalid Credentials"}]}, status_code=400)
    audit(db, request, "login", f"email={body.email}", user_id=user.id)
    db.commit()
    return JSONResponse(TokenResponse(token=create_access_token(user.id)).model_dump())


@router.post("/users")
@limiter.limit(settings.rate_limit_auth)
def register(request: Request, body: RegisterRequest, db: Session = Depends(get_db)):
    user = register_user(db, body.name, body.email, body.password)
    if user is None:
        return JSONResponse({"errors": [{"msg": "User already exists"}]}, status_code=400)
    audit(db, request, "register", f"email={user.email}", user_id=user.id)
    db.commit()
    return JSONResponse(TokenResponse(token=create_access_token(user.id)).model_dump())
