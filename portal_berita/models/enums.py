"""Enumerasi tertutup untuk role, membership, dan status domain."""

from enum import Enum


class Role(str, Enum):
    """Role user."""
    ADMIN = "admin"
    PENULIS = "penulis"
    PEMBACA = "pembaca"


class Membership(str, Enum):
    """Tingkat membership."""
    GUEST = "guest"
    FREE = "free"
    PREMIUM = "premium"


class ReportReason(str, Enum):
    SPAM = "spam"
    KONTEN_TIDAK_PANTAS = "konten_tidak_pantas"
    HOAX = "hoax"
    PELANGGARAN_HAK_CIPTA = "pelanggaran_hak_cipta"
    LAINNYA = "lainnya"


class ReportStatus(str, Enum):
    PENDING = "pending"
    REVIEWED = "reviewed"
    RESOLVED = "resolved"


class NotificationType(str, Enum):
    SYSTEM = "system"
    REPORT = "report"
    MEMBERSHIP = "membership"
    LIKE = "like"


def values_of(enum_cls) -> str:
    """Render nilai enum untuk CheckConstraint, contoh: 'a', 'b'."""
    return ", ".join(f"'{member.value}'" for member in enum_cls)
