from typing import Any, Dict
import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.middleware.auth import get_current_user
from app.models.auth import LoginRequest, LoginResponse
from app.schemas.user import MeView
from app.security.jwt import create_access_token
from app.services.user_service import UserService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/login", response_model=LoginResponse)
def login(
    credentials: LoginRequest,
    db: Session = Depends(get_db)
):
    """
    Exchange login (or email) and password for an access token.

    Raises:
        HTTPException: 401 for unknown users or wrong passwords
    """
    user = UserService(db).authenticate(credentials.login_or_email, credentials.password)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail={"error": "INVALID_CREDENTIALS", "message": "Wrong login or password"}
        )

    logger.info(f"User {user.id} signed in")
    return LoginResponse(access_token=create_access_token(user_id=user.id, login=user.login))


@router.get("/me", response_model=MeView)
def me(
    current_user: Dict[str, Any] = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    user = UserService(db).get_user(current_user['userId'])
    return MeView(user_id=user.id, login=user.login, email=user.email)
