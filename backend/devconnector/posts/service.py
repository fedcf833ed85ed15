"""Post service: create, list, lookup, delete."""

from sqlalchemy.orm import Session

from ..auth.models import User
from ..profiles.service import to_uuid
from .models import Post


def create_post(db: Session, author: User, text: str) -> Post:
    post = Post(user_id=author.id, text=text, name=author.name, avatar=author.avatar)
    db.add(post)
    db.flush()
    return post


def list_posts(db: Session) -> list[Post]:
    """All posts, most recent first."""
    return db.query(Post).order_by(Post.date.desc()).all()


def get_post_by_id(db: Session, post_id: str) -> Post | None:
    uid = to_uuid(post_id)
    if uid is None:
        return None
    return db.query(Post).filter(Post.id == uid).first()


def delete_post(db: Session, post: Post) -> None:
    db.delete(post)
    db.flush()
