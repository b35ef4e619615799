"""CRUD operations for Berita."""

from datetime import date
from typing import List, Optional

from sqlalchemy import or_, select
from sqlalchemy.orm import Session

from portal_berita.crud.base import CRUDBase
from portal_berita.models.berita import Berita


def escape_like(value: str) -> str:
    """Escape LIKE wildcards so user input matches literally."""
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


SORT_OPTIONS = {
    "terbaru": (Berita.tgl_terbit.desc(), Berita.id_berita.desc()),
    "terlama": (Berita.tgl_terbit.asc(), Berita.id_berita.asc()),
    "judul": (Berita.judul.asc(), Berita.id_berita.asc()),
}


class CRUDBerita(CRUDBase[Berita, dict, dict]):
    """CRUD operations for Berita."""

    def get_by_user(self, db: Session, *, id_user: int) -> List[Berita]:
        stmt = (
            select(Berita)
            .where(Berita.id_user == id_user)
            .order_by(Berita.id_berita)
        )
        return list(db.scalars(stmt).unique().all())

    def get_by_kategori(self, db: Session, *, id_kategori: int) -> List[Berita]:
        stmt = (
            select(Berita)
            .where(Berita.id_kategori == id_kategori)
            .order_by(Berita.id_berita)
        )
        return list(db.scalars(stmt).unique().all())

    def search(
        self,
        db: Session,
        *,
        q: Optional[str] = None,
        id_kategori: Optional[int] = None,
        id_user: Optional[int] = None,
        date_from: Optional[date] = None,
        date_to: Optional[date] = None,
        is_premium: Optional[bool] = None,
        sort: str = "terbaru",
        skip: int = 0,
        limit: Optional[int] = None,
    ) -> List[Berita]:
        """
        Search berita by keyword and filters.

        Keyword matching is a case-insensitive substring match on judul and isi.
        """
        conditions = []
        if q:
            pattern = f"%{escape_like(q.strip())}%"
            conditions.append(or_(
                Berita.judul.ilike(pattern, escape="\\"),
                Berita.isi.ilike(pattern, escape="\\"),
            ))
        if id_kategori is not None:
            conditions.append(Berita.id_kategori == id_kategori)
        if id_user is not None:
            conditions.append(Berita.id_user == id_user)
        if date_from is not None:
            conditions.append(Berita.tgl_terbit >= date_from)
        if date_to is not None:
            conditions.append(Berita.tgl_terbit <= date_to)
        if is_premium is not None:
            conditions.append(Berita.is_premium == is_premium)

        stmt = select(Berita).where(*conditions).order_by(*SORT_OPTIONS[sort]).offset(skip)
        if limit is not None:
            stmt = stmt.limit(limit)
        return list(db.scalars(stmt).unique().all())


# Singleton instance
crud_berita = CRUDBerita(Berita)
