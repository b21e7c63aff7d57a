from typing import Optional
from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session
from app.core.exceptions import UserExistsError
from app.db.models import User
from app.models.auth import UserCreate
from app.security.passwords import hash_password, verify_password
import logging

logger = logging.getLogger(__name__)

class UserService:
    """Service for handling user-related operations in the database."""

    def __init__(self, db: Session):
        self.db = db

    def get_user(self, user_id: str) -> Optional[User]:
        return self.db.query(User).filter(User.id == user_id).first()

    def find_by_login_or_email(self, login_or_email: str) -> Optional[User]:
        return self.db.query(User).filter(
            or_(User.login == login_or_email, User.email == login_or_email)
        ).first()

    def create_user(self, user_data: UserCreate) -> User:
        """Create a new user with a hashed password.

        Raises:
            UserExistsError: If the login or email is already registered
        """
        taken = self.db.query(User).filter(
            or_(User.login == user_data.login, User.email == user_data.email)
        ).first()
        if taken:
            field = 'login' if taken.login == user_data.login else 'email'
            logger.warning(f"Attempt to register duplicate {field}: {getattr(user_data, field)}")
            raise UserExistsError(f"User with this {field} already exists", field=field)

        db_user = User(
            login=user_data.login,
            email=user_data.email,
            password_hash=hash_password(user_data.password),
        )
        try:
            self.db.add(db_user)
            self.db.commit()
            self.db.refresh(db_user)
        except IntegrityError as e:
            self.db.rollback()
            logger.warning(f"Concurrent registration for login {user_data.login}: {e}")
            raise UserExistsError("User with this login or email already exists") from e
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error creating user: {e}")
            raise

        logger.info(f"Created new user {db_user.id} with login {db_user.login}")
        return db_user

    def authenticate(self, login_or_email: str, password: str) -> Optional[User]:
        """Return the user when the password matches, None otherwise."""
        user = self.find_by_login_or_email(login_or_email)
        if not user or not verify_password(password, user.password_hash):
            logger.warning(f"Failed login attempt for {login_or_email}")
            return None
        return user
