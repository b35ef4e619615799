"""CRUD operations for `Notification` model."""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy import and_, select, update
from sqlalchemy.orm import Session

from portal_berita.crud.base import CRUDBase
from portal_berita.models.notification import Notification


class CRUDNotification(CRUDBase[Notification, dict, dict]):
    def get_by_user(
        self, db: Session, *, id_user: int, is_read: Optional[bool] = None
    ) -> List[Notification]:
        """Get notifications for a user, newest first, optionally filtered by read status."""
        conditions = [Notification.id_user == id_user]
        
        if is_read is not None:
            conditions.append(Notification.is_read == is_read)
        
        stmt = (
            select(Notification)
            .where(and_(*conditions))
            .order_by(Notification.created_at.desc(), Notification.id_notification.desc())
        )
        return list(db.scalars(stmt).all())

    def get_owned(self, db: Session, *, id_notification: int, id_user: int) -> Optional[Notification]:
        """Lookup by (id, owner). A wrong-owner id is indistinguishable from a missing one."""
        stmt = select(Notification).where(
            Notification.id_notification == id_notification,
            Notification.id_user == id_user,
        )
        return db.scalars(stmt).first()

    def mark_as_read(self, db: Session, *, notification: Notification) -> Notification:
        """Mark a notification as read."""
        notification.is_read = True
        
        try:
            db.add(notification)
            db.commit()
            db.refresh(notification)
        except Exception:
            db.rollback()
            raise
        return notification

    def mark_all_as_read(self, db: Session, *, id_user: int) -> int:
        """Mark all unread notifications for a user as read.
        
        Returns the number of notifications marked.
        """
        stmt = (
            update(Notification)
            .where(Notification.id_user == id_user, Notification.is_read == False)  # noqa: E712
            .values(is_read=True)
        )
        try:
            result = db.execute(stmt)
            db.commit()
        except Exception:
            db.rollback()
            raise
        return result.rowcount or 0

    def create_for_user(
        self, db: Session, *, id_user: int, title: str, message: str, type: str
    ) -> Notification:
        return self.create(
            db,
            obj_in={"id_user": id_user, "title": title, "message": message, "type": type},
        )


# Singleton instance
crud_notification = CRUDNotification(Notification)
