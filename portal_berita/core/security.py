"""Security utilities for JWT authentication and password hashing."""

import re
from datetime import datetime, timedelta
from typing import Any, Dict, Optional

from jose import JWTError, jwt
from passlib.context import CryptContext

from portal_berita.config import settings
from portal_berita.core.exceptions import AuthError


# Password hashing context - supports PBKDF2 (primary) and bcrypt (legacy)
pwd_context = CryptContext(schemes=["pbkdf2_sha256", "bcrypt"], deprecated="auto")

# JWT settings
ALGORITHM = "HS256"

# Minimal satu huruf kecil, satu huruf besar, satu angka, dan satu simbol @$!%*?&
PASSWORD_PATTERN = re.compile(r"^(?=.*[a-z])(?=.*[A-Z])(?=.*\d)(?=.*[@$!%*?&])[A-Za-z\d@$!%*?&]+$")
PASSWORD_MIN_LENGTH = 8


def password_errors(password: str) -> list:
    """Return the list of rule violations for a new password (empty if valid)."""
    errors = []
    if len(password) < PASSWORD_MIN_LENGTH:
        errors.append(f"Password minimal {PASSWORD_MIN_LENGTH} karakter")
    if not PASSWORD_PATTERN.match(password):
        errors.append(
            "Password harus mengandung huruf besar, huruf kecil, angka, dan simbol (@$!%*?&)"
        )
    return errors


def get_password_hash(password: str) -> str:
    """Hash a password using PBKDF2 (primary)."""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a plain password against a hashed password."""
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except ValueError:
        # Return False if the hash scheme is unsupported
        return False


def create_access_token(
    data: Dict[str, Any], expires_delta: Optional[timedelta] = None
) -> str:
    """Create a JWT access token.
    
    Args:
        data: Dictionary containing token claims (e.g., {'sub': '1'})
        expires_delta: Custom expiration time. If None, falls back to
            ACCESS_TOKEN_EXPIRE_DAYS; when that is unset too the token
            carries no `exp` claim.
    
    Returns:
        Encoded JWT token
    
    Raises:
        ValueError: If SECRET_KEY is not configured
    """
    if not settings.SECRET_KEY:
        raise ValueError("SECRET_KEY environment variable is not set")
    
    to_encode = data.copy()
    
    if expires_delta is None and settings.ACCESS_TOKEN_EXPIRE_DAYS:
        expires_delta = timedelta(days=settings.ACCESS_TOKEN_EXPIRE_DAYS)
    if expires_delta is not None:
        to_encode["exp"] = datetime.utcnow() + expires_delta
    to_encode["iat"] = datetime.utcnow()
    
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=ALGORITHM)


def decode_token(token: str) -> Dict[str, Any]:
    """Decode and verify a JWT token.
    
    Raises:
        AuthError: If token is invalid or expired
    """
    try:
        return jwt.decode(token, settings.SECRET_KEY, algorithms=[ALGORITHM])
    except JWTError as e:
        raise AuthError("Could not validate credentials") from e
