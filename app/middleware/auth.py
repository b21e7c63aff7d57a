from typing import Dict, Any, Optional
import logging
import secrets
from fastapi import Request, Depends, HTTPException, status, Security
from fastapi.security import HTTPAuthorizationCredentials, HTTPBasic, HTTPBasicCredentials, HTTPBearer
from sqlalchemy.orm import Session

from app.core.config import settings
from app.db.session import get_db
from app.security.jwt import decode_token
from app.services.user_service import UserService

logger = logging.getLogger(__name__)


class JWTBearer(HTTPBearer):
    """
    Custom security scheme that validates JWT tokens.
    Used to extract and verify the Authorization header.

    With required=False a missing header yields None instead of a 401, which
    lets public endpoints personalize responses for signed-in users.
    """
    def __init__(self, required: bool = True):
        super().__init__(bearerFormat="JWT", auto_error=False)
        self.required = required

    async def __call__(self, request: Request) -> Optional[HTTPAuthorizationCredentials]:
        credentials = await super().__call__(request)
        if credentials is None:
            if not self.required:
                return None
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail={"error": "INVALID_AUTH_HEADER", "message": "Invalid authorization header"}
            )
        return credentials


def _resolve_user(token: str, db: Session) -> Dict[str, Any]:
    """Validate an access token and load its user; raises 401 HTTPException otherwise."""
    decoded_data = decode_token(token)

    if not decoded_data.get("success"):
        if decoded_data.get("error") == "TOKEN_EXPIRED":
            logger.warning('Token expired during authentication')
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail={"error": "TOKEN_EXPIRED", "message": "Token has expired"}
            )
        logger.warning('Invalid token during authentication')
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail={"error": "INVALID_TOKEN", "message": "Invalid authentication token"}
        )

    payload = decoded_data["payload"]
    token_type = payload.get('type')
    if token_type != 'access':
        logger.warning(f'Invalid token type provided: {token_type}')
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail={"error": "INVALID_TOKEN", "message": "Invalid token type, expected 'access'"}
        )

    user_id = payload.get('userId')
    if not user_id:
        logger.warning('Token missing userId claim')
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail={"error": "INVALID_TOKEN", "message": "Invalid token: missing user ID"}
        )

    # Verify user still exists in database
    user = UserService(db).get_user(user_id)
    if not user:
        logger.warning(f'User not found for token userId: {user_id}')
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail={"error": "INVALID_TOKEN", "message": "User associated with token does not exist"}
        )

    return {'userId': user.id, 'login': user.login}


async def get_current_user(
    credentials: HTTPAuthorizationCredentials = Security(JWTBearer()),
    db: Session = Depends(get_db)
) -> Dict[str, Any]:
    """
    Dependency that extracts and validates the JWT from the Authorization header,
    verifies it's an access token, checks user existence, and returns user context.
    """
    user_context = _resolve_user(credentials.credentials, db)
    logger.debug(f"Authenticated user {user_context['userId']}")
    return user_context


async def get_optional_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Security(JWTBearer(required=False)),
    db: Session = Depends(get_db)
) -> Optional[Dict[str, Any]]:
    """Like get_current_user, but anonymous (None) when the token is missing or unusable."""
    if credentials is None:
        return None
    try:
        return _resolve_user(credentials.credentials, db)
    except HTTPException:
        logger.info("Ignoring unusable bearer token on public endpoint")
        return None


basic_scheme = HTTPBasic(auto_error=False)


async def require_admin(credentials: Optional[HTTPBasicCredentials] = Security(basic_scheme)) -> str:
    """HTTP Basic check against the configured super admin credentials."""
    if credentials is not None:
        login_ok = secrets.compare_digest(credentials.username.encode(), settings.ADMIN_LOGIN.encode())
        password_ok = secrets.compare_digest(credentials.password.encode(), settings.ADMIN_PASSWORD.encode())
        if login_ok and password_ok:
            return credentials.username

    logger.warning("Rejected super admin request with missing or wrong credentials")
    raise HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail={"error": "UNAUTHORIZED", "message": "Invalid admin credentials"},
        headers={"WWW-Authenticate": "Basic"},
    )
