"""Shared FastAPI dependencies."""

import logging

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from .auth.models import User
from .auth.service import get_user_by_id
from .auth.tokens import InvalidToken, decode_access_token
from .database import get_db
from .integrations.cache import CacheService

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


def get_cache(request: Request) -> CacheService:
    """Get the cache service from app state."""
    return request.app.state.cache


def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    db: Session = Depends(get_db),
) -> User:
    """Resolve the bearer token to an account, or fail with 401."""
    if credentials is None or not credentials.credentials:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="No token, authorization denied")
    try:
        user_id = decode_access_token(credentials.credentials)
    except InvalidToken as exc:
        logger.info("Rejected bearer token: %s", exc)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Token is not valid") from exc
    user = get_user_by_id(db, user_id)
    if not user:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Token is not valid")
    return user
