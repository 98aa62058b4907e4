"""
User service: registration, credential checks and user administration.
"""
import logging
from typing import List, Optional
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.security import hash_password, verify_password
from app.db.base import utcnow
from app.db.models.user import User
from app.schemas.auth import RegisterRequest, LoginRequest
from app.services.exceptions import (
    MarketplaceError,
    DuplicateEmailError,
    InvalidCredentialsError,
)

logger = logging.getLogger(__name__)


def register_user(db: Session, data: RegisterRequest) -> User:
    """
    Create a user with a salted bcrypt hash of the password.
    
    Args:
        db: Database session
        data: Validated registration payload
        
    Returns:
        The created User (password_hash holds the hash, never the plaintext)
        
    Raises:
        DuplicateEmailError: If the email is already registered
    """
    try:
        existing_user = db.query(User).filter(User.email == data.email).first()
        if existing_user:
            raise DuplicateEmailError()
        
        now = utcnow()
        user = User(
            email=data.email,
            password_hash=hash_password(data.password),
            role=data.role,
            first_name=data.first_name,
            last_name=data.last_name,
            phone=data.phone,
            created_at=now,
            updated_at=now,
        )
        db.add(user)
        db.commit()
        db.refresh(user)
        
        logger.info(f"User registered: user_id={user.id}, role={user.role.value}")
        return user
        
    except MarketplaceError as e:
        db.rollback()
        logger.warning(f"Registration rejected: {e.message}")
        raise
    except IntegrityError:
        # Lost a race with a concurrent registration for the same email
        db.rollback()
        logger.warning("Registration rejected by unique constraint on email")
        raise DuplicateEmailError()
    except Exception as e:
        db.rollback()
        logger.error(f"Failed to register user: {e}", exc_info=True)
        raise


def login_user(db: Session, data: LoginRequest) -> User:
    """
    Check credentials and return the full user record.
    
    Raises:
        InvalidCredentialsError: Unknown email or wrong password (indistinguishable)
    """
    user = db.query(User).filter(User.email == data.email).first()
    if not user or not verify_password(data.password, user.password_hash):
        logger.warning("Login failed: invalid credentials")
        raise InvalidCredentialsError()
    
    logger.info(f"User logged in: user_id={user.id}")
    return user


def get_user_by_id(db: Session, user_id: int) -> Optional[User]:
    return db.get(User, user_id)


def get_all_users(db: Session) -> List[User]:
    return db.query(User).order_by(User.id).all()


def delete_user(db: Session, user_id: int) -> bool:
    """
    Delete a user together with its profile, postings and applications.
    
    The whole cascade runs in one transaction.
    
    Returns:
        True if the user existed and was deleted, False otherwise
    """
    try:
        user = db.get(User, user_id)
        if not user:
            return False
        
        db.delete(user)
        db.commit()
        
        logger.info(f"User deleted: user_id={user_id}")
        return True
        
    except Exception as e:
        db.rollback()
        logger.error(f"Failed to delete user {user_id}: {e}", exc_info=True)
        raise
