import logging
import bcrypt

from app.core.config import BCRYPT_ROUNDS

logger = logging.getLogger(__name__)

# bcrypt only looks at the first 72 bytes of a password
BCRYPT_MAX_BYTES = 72


def hash_password(password: str) -> str:
    """
    Hash a password with a fresh bcrypt salt.
    
    Callers validate length before calling; passwords over 72 bytes are rejected
    here rather than silently truncated.
    
    Args:
        password: Plain text password
        
    Returns:
        bcrypt hash string (salt and cost embedded)
        
    Raises:
        ValueError: If the password exceeds bcrypt's byte limit
    """
    password_bytes = password.encode("utf-8")
    if len(password_bytes) > BCRYPT_MAX_BYTES:
        raise ValueError("Password too long (bcrypt limit 72 bytes)")
    
    salt = bcrypt.gensalt(rounds=BCRYPT_ROUNDS)
    return bcrypt.hashpw(password_bytes, salt).decode("utf-8")


def verify_password(password: str, hashed: str) -> bool:
    """
    Verify a password against its bcrypt hash.
    
    Returns False for malformed hashes instead of raising.
    """
    password_bytes = password.encode("utf-8")
    if len(password_bytes) > BCRYPT_MAX_BYTES:
        return False
    try:
        return bcrypt.checkpw(password_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError) as e:
        logger.warning(f"Password verification failed on malformed hash: {e}")
        return False
