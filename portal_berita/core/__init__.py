"""Core module exports."""

from .security import (
    create_access_token,
    decode_token,
    get_password_hash,
    password_errors,
    verify_password,
    ALGORITHM,
    PASSWORD_PATTERN,
)

__all__ = [
    "create_access_token",
    "decode_token",
    "get_password_hash",
    "password_errors",
    "verify_password",
    "ALGORITHM",
    "PASSWORD_PATTERN",
]
