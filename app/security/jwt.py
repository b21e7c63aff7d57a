from typing import Dict, Any, Optional
from datetime import datetime, timedelta, timezone
from jose import jwt
from jose.exceptions import JWTError, ExpiredSignatureError
import logging

from app.core.config import settings

logger = logging.getLogger(__name__)


def create_access_token(
    user_id: str,
    login: str,
    expires_in: Optional[int] = None
) -> str:
    """
    Create a signed JWT access token for a blog platform user.

    Args:
        user_id: The user's unique identifier in the system
        login: The user's login, carried so handlers can show it without a lookup
        expires_in: Token lifetime in seconds (default: ACCESS_TOKEN_EXPIRE_MINUTES)

    Returns:
        Encoded JWT token as a string
    """
    if expires_in is None:
        expires_in = settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60

    now = datetime.now(timezone.utc)
    to_encode = {
        "userId": user_id,
        "login": login,
        "exp": now + timedelta(seconds=expires_in),
        "iat": now,
        "type": "access"
    }

    try:
        encoded_jwt = jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)
        logger.info(f"Successfully created access token for user {user_id}")
        return encoded_jwt
    except JWTError as e:
        logger.error(f"Failed to create access token: {str(e)}")
        raise


def decode_token(token: str) -> Dict[str, Any]:
    """
    Decode and verify a JWT token.

    Returns:
        Dictionary with 'success': True and token claims if valid,
        or 'success': False with 'error': 'TOKEN_EXPIRED' or 'INVALID_TOKEN'
    """
    try:
        decoded_token = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
        logger.debug(f"Decoded token for user {decoded_token.get('userId')}")
        return {"success": True, "payload": decoded_token}
    except ExpiredSignatureError:
        logger.warning("Token expired during decoding")
        return {"success": False, "error": "TOKEN_EXPIRED"}
    except JWTError as e:
        logger.warning(f"Token decoding failed due to invalid signature or other JWT error: {str(e)}")
        return {"success": False, "error": "INVALID_TOKEN"}
