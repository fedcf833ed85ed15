"""Post routes."""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from ..auth.models import User
from ..database import get_db
from ..dependencies import get_current_user
from .models import Post
from .schemas import PostCreateRequest, PostResponse
from .service import create_post, delete_post, get_post_by_id, list_posts

router = APIRouter(prefix="/posts", tags=["posts"])


def _post_json(post: Post) -> dict:
    return PostResponse.model_validate(post).model_dump(mode="json")


@router.post("")
def add_post(
    body: PostCreateRequest,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    post = create_post(db, user, body.text)
    db.commit()
    return JSONResponse(_post_json(post))


@router.get("")
def all_posts(
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    return JSONResponse([_post_json(p) for p in list_posts(db)])


@router.get("/{post_id}")
def post_detail(
    post_id: str,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    post = get_post_by_id(db, post_id)
    if not post:
        return JSONResponse({"msg": "Post not found"}, status_code=400)
    return JSONResponse(_post_json(post))


@router.delete("/{post_id}")
def remove_post(
    post_id: str,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    post = get_post_by_id(db, post_id)
    if not post:
        return JSONResponse({"msg": "Post not found"}, status_code=400)
    if post.user_id != user.id:
        return JSONResponse({"msg": "User not authorized"}, status_code=401)
    delete_post(db, post)
    db.commit()
    return JSONResponse({"msg": "Post removed"})
