from typing import Any, Dict, Optional
import logging

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from app.api.v1.errors import http_error
from app.core.exceptions import DomainError
from app.db.session import get_db
from app.middleware.auth import get_current_user, get_optional_user
from app.models.comment import CommentInput
from app.models.pagination import PageParams, comment_page_params, post_page_params
from app.models.reaction import LikeStatusInput
from app.schemas.comment import CommentView
from app.schemas.pagination import Paginated
from app.schemas.post import PostView
from app.services.comment_service import CommentService
from app.services.post_service import PostService

router = APIRouter()

# Use the standard logger
logger = logging.getLogger(__name__)


@router.get("/posts", response_model=Paginated[PostView])
def list_posts(
    params: PageParams = Depends(post_page_params),
    current_user: Optional[Dict[str, Any]] = Depends(get_optional_user),
    db: Session = Depends(get_db)
):
    """
    List visible posts. Signed-in viewers also get their own like status
    on every post.
    """
    viewer_id = current_user['userId'] if current_user else None
    try:
        return PostService(db).list_posts(params, viewer_id)
    except DomainError as e:
        raise http_error(e)


@router.get("/posts/{post_id}", response_model=PostView)
def get_post(
    post_id: str,
    current_user: Optional[Dict[str, Any]] = Depends(get_optional_user),
    db: Session = Depends(get_db)
):
    viewer_id = current_user['userId'] if current_user else None
    try:
        return PostService(db).get_post(post_id, viewer_id)
    except DomainError as e:
        raise http_error(e)


@router.get("/posts/{post_id}/comments", response_model=Paginated[CommentView])
def list_post_comments(
    post_id: str,
    params: PageParams = Depends(comment_page_params),
    current_user: Optional[Dict[str, Any]] = Depends(get_optional_user),
    db: Session = Depends(get_db)
):
    viewer_id = current_user['userId'] if current_user else None
    try:
        return CommentService(db).list_comments(post_id, params, viewer_id)
    except DomainError as e:
        raise http_error(e)


@router.post("/posts/{post_id}/comments", response_model=CommentView, status_code=status.HTTP_201_CREATED)
def create_post_comment(
    post_id: str,
    comment_data: CommentInput,
    current_user: Dict[str, Any] = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    Create a new comment on a post.

    Raises:
        HTTPException: 404 if the post doesn't exist or was deleted
    """
    logger.info(f"User {current_user['userId']} commenting on post {post_id}")
    try:
        return CommentService(db).create_comment(post_id, current_user['userId'], comment_data)
    except DomainError as e:
        raise http_error(e)


@router.put("/posts/{post_id}/like-status", status_code=status.HTTP_204_NO_CONTENT)
def set_post_like_status(
    post_id: str,
    body: LikeStatusInput,
    current_user: Dict[str, Any] = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    Like, dislike or clear the current user's reaction on a post.

    Raises:
        HTTPException: 404 if the post doesn't exist or was deleted
    """
    try:
        PostService(db).set_like_status(post_id, current_user['userId'], body.like_status)
    except DomainError as e:
        raise http_error(e)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
