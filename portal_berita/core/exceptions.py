"""Custom exceptions untuk aplikasi Portal Berita.

Semua exception turunan `PortalBeritaException` dirender oleh handler di
`portal_berita.main` menjadi envelope JSON:

    {"success": false, "message": "...", "errors": {...}}

`errors` hanya ada pada `ValidationError`.
"""

from typing import Dict, List, Optional

from fastapi import HTTPException, status


class PortalBeritaException(HTTPException):
    """Base exception untuk semua error domain."""
    pass


class ValidationError(PortalBeritaException):
    """
    Exception ketika input tidak lolos validasi.

    Status Code: 422 Unprocessable Entity

    Penggunaan:
        >>> raise ValidationError({"email": ["Email sudah terdaftar"]})

    Response Body:
        {
            "success": false,
            "message": "Validation error",
            "errors": {"email": ["Email sudah terdaftar"]}
        }
    """

    def __init__(self, errors: Dict[str, List[str]], message: str = "Validation error"):
        self.errors = errors
        super().__init__(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=message,
        )


class AuthError(PortalBeritaException):
    """Exception ketika token tidak ada, tidak valid, atau kredensial salah."""

    def __init__(self, detail: str = "Unauthorized"):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"},
        )


class ForbiddenError(PortalBeritaException):
    """Exception ketika user terautentikasi tetapi tidak punya akses."""

    def __init__(self, detail: str = "Unauthorized"):
        super().__init__(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=detail,
        )


class NotFoundError(PortalBeritaException):
    """Exception ketika resource tidak ditemukan."""

    def __init__(self, detail: str = "Resource not found"):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=detail,
        )


class ConflictError(PortalBeritaException):
    """Exception untuk aksi duplikat (misal melaporkan berita yang sama dua kali)."""

    def __init__(self, detail: str):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=detail,
        )


class ServerError(PortalBeritaException):
    """Exception untuk kegagalan tak terduga. Detail internal tidak pernah dikirim ke client."""

    def __init__(self, detail: str = "Terjadi kesalahan pada server"):
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=detail,
        )


def error_body(exc: PortalBeritaException) -> Dict[str, object]:
    """Build the JSON envelope for a domain exception."""
    body: Dict[str, object] = {"success": False, "message": exc.detail}
    errors: Optional[Dict[str, List[str]]] = getattr(exc, "errors", None)
    if errors is not None:
        body["errors"] = errors
    return body


__all__ = [
    "PortalBeritaException",
    "ValidationError",
    "AuthError",
    "ForbiddenError",
    "NotFoundError",
    "ConflictError",
    "ServerError",
    "error_body",
]
