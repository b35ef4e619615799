"""
SQLAlchemy Models for Portal Berita
"""

from ..database import Base
from .user import User
from .kategori import Kategori
from .berita import Berita
from .disukai import Disukai
from .tidak_disukai import TidakDisukai
from .history import History
from .bookmark import Bookmark
from .notification import Notification
from .report import Report

# Export all models
__all__ = [
    "Base",
    "User",
    "Kategori",
    "Berita",
    "Disukai",
    "TidakDisukai",
    "History",
    "Bookmark",
    "Notification",
    "Report",
]
