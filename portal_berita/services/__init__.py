"""Services package for Portal Berita application."""

from .notification_service import notification_service, NotificationService
from .auth_service import auth_service, AuthService
from .user_service import user_service, UserService
from .membership_service import membership_service, MembershipService, PaymentSimulator
from .berita_service import berita_service, BeritaService
from .engagement_service import (
    like_service,
    dislike_service,
    history_service,
    bookmark_service,
    ReactionService,
    HistoryService,
    BookmarkService,
)
from .report_service import report_service, ReportService

__all__ = [
    "notification_service",
    "NotificationService",
    "auth_service",
    "AuthService",
    "user_service",
    "UserService",
    "membership_service",
    "MembershipService",
    "PaymentSimulator",
    "berita_service",
    "BeritaService",
    "like_service",
    "dislike_service",
    "history_service",
    "bookmark_service",
    "ReactionService",
    "HistoryService",
    "BookmarkService",
    "report_service",
    "ReportService",
]
