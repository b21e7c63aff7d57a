from fastapi import APIRouter, Depends, Response, status
from typing import Dict, Any, Optional
import logging

from app.api.v1.errors import http_error
from app.core.exceptions import DomainError
from app.models.comment import CommentInput
from app.models.reaction import LikeStatusInput
from app.schemas.comment import CommentView
from app.middleware.auth import get_current_user, get_optional_user
from app.services.comment_service import CommentService
from app.db.session import get_db
from sqlalchemy.orm import Session

router = APIRouter()

# Use the standard logger
logger = logging.getLogger(__name__)


@router.get("/comments/{comment_id}", response_model=CommentView)
def get_comment(
    comment_id: str,
    current_user: Optional[Dict[str, Any]] = Depends(get_optional_user),
    db: Session = Depends(get_db)
):
    viewer_id = current_user['userId'] if current_user else None
    try:
        return CommentService(db).get_comment(comment_id, viewer_id)
    except DomainError as e:
        raise http_error(e)


@router.put("/comments/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_comment(
    comment_id: str,
    comment_data: CommentInput,
    db: Session = Depends(get_db),
    current_user: Dict[str, Any] = Depends(get_current_user)
):
    """
    Edit a comment. Only its author may do this.

    Raises:
        HTTPException: 403 if the comment belongs to someone else
                    404 if the comment doesn't exist or was deleted
    """
    try:
        CommentService(db).update_comment(comment_id, current_user['userId'], comment_data)
    except DomainError as e:
        raise http_error(e)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/comments/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_comment(
    comment_id: str,
    db: Session = Depends(get_db),
    current_user: Dict[str, Any] = Depends(get_current_user)
):
    try:
        CommentService(db).delete_comment(comment_id, current_user['userId'])
    except DomainError as e:
        raise http_error(e)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.put("/comments/{comment_id}/like-status", status_code=status.HTTP_204_NO_CONTENT)
def set_comment_like_status(
    comment_id: str,
    body: LikeStatusInput,
    db: Session = Depends(get_db),
    current_user: Dict[str, Any] = Depends(get_current_user)
):
    try:
        CommentService(db).set_like_status(comment_id, current_user['userId'], body.like_status)
    except DomainError as e:
        raise http_error(e)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
