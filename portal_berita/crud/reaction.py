"""CRUD operations for Disukai and TidakDisukai.

Both tables share the same shape: one row per (id_user, id_berita) carrying a
nullable boolean. Writes are upserts keyed by that pair.
"""

import logging
from typing import Generic, List, Optional, Tuple, Type, TypeVar

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from portal_berita.crud.base import CRUDBase
from portal_berita.database import Base
from portal_berita.models.disukai import Disukai
from portal_berita.models.tidak_disukai import TidakDisukai

logger = logging.getLogger(__name__)

ReactionType = TypeVar("ReactionType", bound=Base)


class CRUDReaction(CRUDBase[ReactionType, dict, dict], Generic[ReactionType]):
    """CRUD for a (user, berita) keyed boolean reaction."""

    def __init__(self, model: Type[ReactionType], value_field: str):
        super().__init__(model)
        self.value_field = value_field

    def get_pair(self, db: Session, *, id_user: int, id_berita: int) -> Optional[ReactionType]:
        stmt = select(self.model).where(
            self.model.id_user == id_user,
            self.model.id_berita == id_berita,
        )
        return db.scalars(stmt).first()

    def get_by_value(self, db: Session, *, value: bool) -> List[ReactionType]:
        column = getattr(self.model, self.value_field)
        pk = self.model.__mapper__.primary_key[0]
        stmt = select(self.model).where(column == value).order_by(pk)
        return list(db.scalars(stmt).all())

    def upsert(
        self,
        db: Session,
        *,
        id_user: int,
        id_berita: int,
        value: Optional[bool],
    ) -> Tuple[ReactionType, bool]:
        """
        Create the row for (id_user, id_berita) or overwrite its value.

        The unique constraint on the pair is the arbiter: if a concurrent
        request inserts first, the losing insert is rolled back and the
        winner's row is updated instead.

        Returns:
            (row, created)
        """
        existing = self.get_pair(db, id_user=id_user, id_berita=id_berita)
        if existing is None:
            db_obj = self.model(id_user=id_user, id_berita=id_berita, **{self.value_field: value})
            try:
                db.add(db_obj)
                db.commit()
                db.refresh(db_obj)
                return db_obj, True
            except IntegrityError:
                db.rollback()
                logger.info(
                    f"[REACTION] Concurrent insert on {self.model.__tablename__} "
                    f"user={id_user} berita={id_berita}, falling back to update"
                )
                existing = self.get_pair(db, id_user=id_user, id_berita=id_berita)
                if existing is None:
                    raise

        setattr(existing, self.value_field, value)
        try:
            db.add(existing)
            db.commit()
            db.refresh(existing)
        except Exception:
            db.rollback()
            raise
        return existing, False

    def set_value(self, db: Session, *, db_obj: ReactionType, value: bool) -> ReactionType:
        return self.update(db, db_obj=db_obj, obj_in={self.value_field: value})


# Singleton instances
crud_disukai = CRUDReaction(Disukai, "suka")
crud_tidak_disukai = CRUDReaction(TidakDisukai, "tidak_suka")
