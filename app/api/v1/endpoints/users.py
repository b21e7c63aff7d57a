import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.api.v1.errors import http_error
from app.core.exceptions import DomainError
from app.db.session import get_db
from app.middleware.auth import require_admin
from app.models.auth import UserCreate
from app.schemas.user import UserView
from app.services.user_service import UserService

logger = logging.getLogger(__name__)

router = APIRouter(dependencies=[Depends(require_admin)])


@router.post("/users", response_model=UserView, status_code=status.HTTP_201_CREATED)
def create_user(
    user_data: UserCreate,
    db: Session = Depends(get_db)
):
    """
    Register a user on behalf of the super admin.

    Raises:
        HTTPException: 400 if the login or email is already taken
    """
    try:
        user = UserService(db).create_user(user_data)
    except DomainError as e:
        raise http_error(e)
    return UserView.model_validate(user)
