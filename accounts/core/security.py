"""
Security: password hashing (no plain-text passwords at rest).
Challenge: Salted adaptive hashing, constant-time verification.
"""

import logging

from passlib.context import CryptContext

from accounts.config import get_settings
from accounts.core.exceptions import HashingError

logger = logging.getLogger(__name__)

settings = get_settings()
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.bcrypt_rounds,
)

# bcrypt only reads the first 72 bytes of a secret.
BCRYPT_MAX_PASSWORD_BYTES = 72


def hash_password(password: str) -> str:
    """One-way salted hash for storage. Salt and cost are embedded in the result."""
    if len(password.encode("utf-8")) > BCRYPT_MAX_PASSWORD_BYTES:
        raise HashingError(f"password exceeds {BCRYPT_MAX_PASSWORD_BYTES} bytes")
    try:
        return pwd_context.hash(password)
    except (TypeError, ValueError) as exc:
        raise HashingError(str(exc)) from exc


def verify_password(plain: str, hashed: str) -> bool:
    """Constant-time comparison. A hash that cannot be read counts as a mismatch."""
    # No stored hash can come from a longer secret; bcrypt would truncate it
    if len(plain.encode("utf-8")) > BCRYPT_MAX_PASSWORD_BYTES:
        return False
    try:
        return pwd_context.verify(plain, hashed)
    except (TypeError, ValueError) as exc:
        logger.warning("password verification rejected: %s", exc)
        return False
