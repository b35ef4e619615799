"""CRUD operations for Bookmark."""

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from portal_berita.crud.base import CRUDBase
from portal_berita.models.bookmark import Bookmark


class CRUDBookmark(CRUDBase[Bookmark, dict, dict]):
    def get_by_user(self, db: Session, *, id_user: int) -> List[Bookmark]:
        stmt = (
            select(Bookmark)
            .options(selectinload(Bookmark.berita))
            .where(Bookmark.id_user == id_user)
            .order_by(Bookmark.created_at.desc(), Bookmark.id_bookmark.desc())
        )
        return list(db.scalars(stmt).all())

    def get_owned(self, db: Session, *, id_bookmark: int, id_user: int) -> Optional[Bookmark]:
        """Lookup scoped to the owner; a foreign bookmark looks exactly like a missing one."""
        stmt = select(Bookmark).where(
            Bookmark.id_bookmark == id_bookmark,
            Bookmark.id_user == id_user,
        )
        return db.scalars(stmt).first()

    def get_pair(self, db: Session, *, id_user: int, id_berita: int) -> Optional[Bookmark]:
        stmt = select(Bookmark).where(
            Bookmark.id_user == id_user,
            Bookmark.id_berita == id_berita,
        )
        return db.scalars(stmt).first()


# Singleton instance
crud_bookmark = CRUDBookmark(Bookmark)
