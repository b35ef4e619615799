"""CRUD operations for Kategori."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from portal_berita.crud.base import CRUDBase
from portal_berita.models.berita import Berita
from portal_berita.models.kategori import Kategori
from portal_berita.schemas.kategori import KategoriCreate, KategoriUpdate


class CRUDKategori(CRUDBase[Kategori, KategoriCreate, KategoriUpdate]):
    """CRUD operations for Kategori."""

    def get_by_name(self, db: Session, *, name: str) -> Optional[Kategori]:
        stmt = select(Kategori).where(Kategori.kategori == name).limit(1)
        return db.scalars(stmt).first()

    def is_in_use(self, db: Session, *, id_kategori: int) -> bool:
        """Check whether any berita still references the kategori."""
        stmt = select(Berita.id_berita).where(Berita.id_kategori == id_kategori).limit(1)
        return db.scalars(stmt).first() is not None


# Singleton instance
crud_kategori = CRUDKategori(Kategori)
