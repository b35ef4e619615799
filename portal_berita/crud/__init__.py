"""CRUD operations package - exports singleton instances for all models."""

from .base import CRUDBase
from .user import crud_user
from .kategori import crud_kategori
from .berita import crud_berita
from .reaction import crud_disukai, crud_tidak_disukai
from .history import crud_history
from .bookmark import crud_bookmark
from .notification import crud_notification
from .report import crud_report


__all__ = [
    # Base
    "CRUDBase",
    # CRUD instances
    "crud_user",
    "crud_kategori",
    "crud_berita",
    "crud_disukai",
    "crud_tidak_disukai",
    "crud_history",
    "crud_bookmark",
    "crud_notification",
    "crud_report",
]
