"""Service layer for in-app notifications."""

import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from portal_berita.core.exceptions import NotFoundError
from portal_berita.crud import crud_notification
from portal_berita.models.enums import NotificationType, ReportStatus
from portal_berita.models.notification import Notification
from portal_berita.models.user import User

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Notifikasi tidak ditemukan"


class NotificationService:
    """
    Service for managing notifications.

    Every read or write is scoped to the owner passed in by the caller: the
    lookup is always by (id_notification, id_user), so another user's
    notification id behaves exactly like a missing one.
    """

    REPORT_STATUS_MESSAGES = {
        ReportStatus.PENDING.value: "Laporan Anda dikembalikan ke antrian peninjauan.",
        ReportStatus.REVIEWED.value: "Laporan Anda sedang ditinjau oleh admin.",
        ReportStatus.RESOLVED.value: "Laporan Anda telah diselesaikan. Terima kasih atas partisipasi Anda.",
    }

    def notify(
        self,
        db: Session,
        *,
        id_user: int,
        title: str,
        message: str,
        type: NotificationType = NotificationType.SYSTEM,
    ) -> Notification:
        notification = crud_notification.create_for_user(
            db, id_user=id_user, title=title, message=message, type=type.value
        )
        logger.info(
            f"[NOTIFICATION] Created id={notification.id_notification} "
            f"type={notification.type} for user={id_user}"
        )
        return notification

    def notify_membership_upgraded(self, db: Session, *, user: User) -> Notification:
        return self.notify(
            db,
            id_user=user.id_user,
            title="Membership Premium Aktif",
            message="Selamat! Akun Anda kini memiliki akses ke seluruh berita premium.",
            type=NotificationType.MEMBERSHIP,
        )

    def notify_report_status(self, db: Session, *, id_user: int, judul: str, status: str) -> Notification:
        return self.notify(
            db,
            id_user=id_user,
            title=f"Status laporan: {status}",
            message=f"Berita \"{judul}\": {self.REPORT_STATUS_MESSAGES[status]}",
            type=NotificationType.REPORT,
        )

    def notify_berita_liked(self, db: Session, *, id_author: int, liker: User, judul: str) -> Notification:
        return self.notify(
            db,
            id_user=id_author,
            title="Berita Anda disukai",
            message=f"{liker.name} menyukai berita \"{judul}\".",
            type=NotificationType.LIKE,
        )

    # ----- Owner-scoped operations -----
    def list_for_user(
        self, db: Session, *, user: User, is_read: Optional[bool] = None
    ) -> List[Notification]:
        return crud_notification.get_by_user(db, id_user=user.id_user, is_read=is_read)

    def _get_owned(self, db: Session, *, user: User, id_notification: int) -> Notification:
        notification = crud_notification.get_owned(
            db, id_notification=id_notification, id_user=user.id_user
        )
        if notification is None:
            raise NotFoundError(NOT_FOUND_MESSAGE)
        return notification

    def mark_read(self, db: Session, *, user: User, id_notification: int) -> Notification:
        notification = self._get_owned(db, user=user, id_notification=id_notification)
        return crud_notification.mark_as_read(db, notification=notification)

    def mark_all_read(self, db: Session, *, user: User) -> int:
        count = crud_notification.mark_all_as_read(db, id_user=user.id_user)
        logger.info(f"[NOTIFICATION] Marked {count} notification(s) read for user={user.id_user}")
        return count

    def delete(self, db: Session, *, user: User, id_notification: int) -> None:
        notification = self._get_owned(db, user=user, id_notification=id_notification)
        crud_notification.delete(db, id=notification.id_notification)


# Singleton instance
notification_service = NotificationService()
