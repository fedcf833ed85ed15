"""Account service: registration, password hashing, credential checks."""

import hashlib
from urllib.parse import urlencode
from uuid import UUID

import bcrypt
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from .models import User

GRAVATAR_URL = "https://www.gravatar.com/avatar"


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode(), bcrypt.gensalt()).decode()


def verify_password(plain: str, hashed: str) -> bool:
    return bcrypt.checkpw(plain.encode(), hashed.encode())


def gravatar_url(email: str) -> str:
    """Gravatar image for an email: 200px, PG rated, mystery-man fallback."""
    digest = hashlib.md5(email.strip().lower().encode()).hexdigest()
    return f"{GRAVATAR_URL}/{digest}?{urlencode({'s': '200', 'r': 'pg', 'd': 'mm'})}"


def get_user_by_email(db: Session, email: str) -> User | None:
    return db.query(User).filter(User.email == email.strip().lower()).first()


def get_user_by_id(db: Session, user_id: UUID) -> User | None:
    return db.query(User).filter(User.id == user_id).first()


def register_user(db: Session, name: str, email: str, password: str) -> User | None:
    """Create an account, or return None when the email is already taken."""
    if get_user_by_email(db, email):
        return None
    user = User(
        name=name,
        email=email.strip().lower(),
        password_hash=hash_password(password),
        avatar=gravatar_url(email),
    )
    db.add(user)
    try:
        db.flush()
    except IntegrityError:
        # A concurrent registration claimed the email after the lookup
        db.rollback()
        return None
    return user


def authenticate_user(db: Session, email: str, password: str) -> User | None:
    """Verify credentials and return user, or None if invalid."""
    user = get_user_by_email(db, email)
    if not user or not verify_password(password, user.password_hash):
        return None
    return user
