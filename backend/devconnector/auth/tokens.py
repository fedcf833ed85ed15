"""Bearer token issuing and verification (HS256 JWT)."""

from datetime import UTC, datetime, timedelta
from uuid import UUID

from jose import JWTError, jwt

from ..config import settings


class InvalidToken(Exception):
    """Raised when a bearer token is malformed, expired, or badly signed."""

    pass


def create_access_token(user_id: UUID, expires_in: int | None = None) -> str:
    seconds = settings.jwt_expire_seconds if expires_in is None else expires_in
    payload = {
        "sub": str(user_id),
        "exp": datetime.now(UTC) + timedelta(seconds=seconds),
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> UUID:
    """Return the account id carried by the token."""
    try:
        payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except JWTError as exc:
        raise InvalidToken(str(exc)) from exc
    try:
        return UUID(payload["sub"])
    except (KeyError, ValueError, TypeError) as exc:
        raise InvalidToken("Invalid token subject") from exc
