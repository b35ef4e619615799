"""CRUD operations for Report."""

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from portal_berita.crud.base import CRUDBase
from portal_berita.models.report import Report


class CRUDReport(CRUDBase[Report, dict, dict]):
    def get_pair(self, db: Session, *, id_user: int, id_berita: int) -> Optional[Report]:
        stmt = select(Report).where(
            Report.id_user == id_user,
            Report.id_berita == id_berita,
        )
        return db.scalars(stmt).first()

    def get_filtered(self, db: Session, *, status: Optional[str] = None) -> List[Report]:
        """Reports newest first, optionally filtered by status."""
        stmt = (
            select(Report)
            .options(selectinload(Report.user), selectinload(Report.berita))
            .order_by(Report.created_at.desc(), Report.id_report.desc())
        )
        if status is not None:
            stmt = stmt.where(Report.status == status)
        return list(db.scalars(stmt).all())


# Singleton instance
crud_report = CRUDReport(Report)
