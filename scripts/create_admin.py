"""
Script to create an administrator account, or reset an existing administrator's password.
Run: python -m scripts.create_admin admin@example.com 'S3curePassw0rd' [First] [Last]
"""
import sys
import os

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.db.session import SessionLocal
from app.db.init_db import init_db
from app.db.models.user import User, UserRole
from app.core.security import hash_password
from app.schemas.auth import RegisterRequest
from app.services import user_service
from app.services.exceptions import DuplicateEmailError
import logging

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def create_admin(email: str, password: str, first_name: str = "Platform", last_name: str = "Admin") -> bool:
    """Create an administrator, or reset the password of an existing administrator."""
    init_db()
    db = SessionLocal()
    try:
        request = RegisterRequest(
            email=email,
            password=password,
            role=UserRole.ADMINISTRATOR,
            first_name=first_name,
            last_name=last_name,
        )
        try:
            user = user_service.register_user(db, request)
            logger.info(f"Administrator created: user_id={user.id}")
            return True
        except DuplicateEmailError:
            user = db.query(User).filter(User.email == request.email).first()
            if user.role != UserRole.ADMINISTRATOR:
                logger.error(f"{email} is registered as {user.role.value}; roles cannot be changed")
                return False
            user.password_hash = hash_password(password)
            db.commit()
            logger.info(f"Administrator password reset: user_id={user.id}")
            return True
    finally:
        db.close()


if __name__ == "__main__":
    if len(sys.argv) < 3:
        print("Usage: python -m scripts.create_admin <email> <password> [first_name] [last_name]")
        sys.exit(1)
    ok = create_admin(*sys.argv[1:5])
    sys.exit(0 if ok else 1)
