"""CRUD operations for History."""

from typing import List

from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from portal_berita.crud.base import CRUDBase
from portal_berita.models.history import History


class CRUDHistory(CRUDBase[History, dict, dict]):
    def get_all_with_relations(self, db: Session) -> List[History]:
        stmt = (
            select(History)
            .options(selectinload(History.user), selectinload(History.berita))
            .order_by(History.id_history)
        )
        return list(db.scalars(stmt).all())

    def get_by_user(self, db: Session, *, id_user: int) -> List[History]:
        """Riwayat baca user, terbaru dulu."""
        stmt = (
            select(History)
            .options(selectinload(History.berita))
            .where(History.id_user == id_user)
            .order_by(History.created_at.desc(), History.id_history.desc())
        )
        return list(db.scalars(stmt).all())

    def record(self, db: Session, *, id_user: int, id_berita: int) -> History:
        """Append a new history row. Repeat visits produce repeat rows."""
        return self.create(db, obj_in={"id_user": id_user, "id_berita": id_berita})


# Singleton instance
crud_history = CRUDHistory(History)
