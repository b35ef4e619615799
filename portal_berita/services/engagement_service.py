"""Reader engagement: likes, dislikes, reading history, and bookmarks."""

import logging
from typing import Dict, List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from portal_berita.core.exceptions import ConflictError, NotFoundError, ValidationError
from portal_berita.crud import crud_berita, crud_bookmark, crud_disukai, crud_history, crud_tidak_disukai, crud_user
from portal_berita.crud.reaction import CRUDReaction
from portal_berita.models.bookmark import Bookmark
from portal_berita.models.history import History
from portal_berita.models.user import User
from portal_berita.services.notification_service import notification_service

logger = logging.getLogger(__name__)


def _resolve_actor_id(id_user: Optional[int], caller: Optional[User]) -> int:
    """Explicit id_user wins; otherwise fall back to the bearer caller."""
    if id_user is not None:
        return id_user
    if caller is not None:
        return caller.id_user
    raise ValidationError({"id_user": ["id_user wajib diisi"]})


def _reference_errors(db: Session, *, id_user: int, id_berita: int) -> Dict[str, List[str]]:
    errors: Dict[str, List[str]] = {}
    if crud_user.get(db, id_user) is None:
        errors["id_user"] = ["User tidak ditemukan"]
    if crud_berita.get(db, id_berita) is None:
        errors["id_berita"] = ["Berita tidak ditemukan"]
    return errors


class ReactionService:
    """
    Likes and dislikes share one shape: a single row per (user, berita)
    carrying a nullable boolean. Posting again overwrites the value.
    """

    def __init__(self, crud: CRUDReaction, label: str, notify_author: bool = False):
        self.crud = crud
        self.label = label
        self.notify_author = notify_author

    @property
    def not_found_message(self) -> str:
        return f"{self.label.capitalize()} tidak ditemukan"

    def list_all(self, db: Session):
        return self.crud.get_multi(db)

    def list_by_value(self, db: Session, *, value: bool):
        return self.crud.get_by_value(db, value=value)

    def get(self, db: Session, id_reaction: int):
        row = self.crud.get(db, id_reaction)
        if row is None:
            raise NotFoundError(self.not_found_message)
        return row

    def react(
        self,
        db: Session,
        *,
        id_berita: int,
        id_user: Optional[int] = None,
        value: Optional[bool] = None,
        caller: Optional[User] = None,
    ):
        """
        Upsert the caller's reaction to a berita. ``value`` defaults to True.

        Raises:
            ValidationError: no user given, or user/berita does not exist
        """
        actor_id = _resolve_actor_id(id_user, caller)
        errors = _reference_errors(db, id_user=actor_id, id_berita=id_berita)
        if errors:
            raise ValidationError(errors)

        if value is None:
            value = True

        row, created = self.crud.upsert(db, id_user=actor_id, id_berita=id_berita, value=value)
        logger.info(
            f"[{self.label.upper()}] {'Created' if created else 'Updated'} "
            f"user={actor_id} berita={id_berita} value={value}"
        )

        if created and value and self.notify_author:
            self._notify_author(db, actor_id=actor_id, id_berita=id_berita)
        return row

    def _notify_author(self, db: Session, *, actor_id: int, id_berita: int) -> None:
        berita = crud_berita.get(db, id_berita)
        if berita is None or berita.id_user == actor_id:
            return
        # Dangling author: nobody to notify
        if crud_user.get(db, berita.id_user) is None:
            return
        liker = crud_user.get(db, actor_id)
        notification_service.notify_berita_liked(
            db, id_author=berita.id_user, liker=liker, judul=berita.judul
        )

    def update(self, db: Session, *, id_reaction: int, value: bool):
        row = self.get(db, id_reaction)
        return self.crud.set_value(db, db_obj=row, value=value)

    def delete(self, db: Session, *, id_reaction: int) -> None:
        self.get(db, id_reaction)
        self.crud.delete(db, id=id_reaction)
        logger.info(f"[{self.label.upper()}] Deleted id={id_reaction}")


class HistoryService:
    def list_all(self, db: Session) -> List[History]:
        return crud_history.get_all_with_relations(db)

    def get(self, db: Session, id_history: int) -> History:
        history = crud_history.get(db, id_history)
        if history is None:
            raise NotFoundError("History tidak ditemukan")
        return history

    def list_by_user(self, db: Session, id_user: int) -> List[History]:
        """
        Raises:
            NotFoundError: the user has no history at all
        """
        items = crud_history.get_by_user(db, id_user=id_user)
        if not items:
            raise NotFoundError("History tidak ditemukan untuk user ini")
        return items

    def record(
        self,
        db: Session,
        *,
        id_berita: int,
        id_user: Optional[int] = None,
        caller: Optional[User] = None,
    ) -> History:
        actor_id = _resolve_actor_id(id_user, caller)
        errors = _reference_errors(db, id_user=actor_id, id_berita=id_berita)
        if errors:
            raise ValidationError(errors)
        return crud_history.record(db, id_user=actor_id, id_berita=id_berita)

    def delete(self, db: Session, *, id_history: int) -> None:
        self.get(db, id_history)
        crud_history.delete(db, id=id_history)


class BookmarkService:
    """Bookmarks are private: every lookup is scoped to the owner."""

    def list_for_user(self, db: Session, *, user: User) -> List[Bookmark]:
        return crud_bookmark.get_by_user(db, id_user=user.id_user)

    def get_owned(self, db: Session, *, user: User, id_bookmark: int) -> Bookmark:
        bookmark = crud_bookmark.get_owned(db, id_bookmark=id_bookmark, id_user=user.id_user)
        if bookmark is None:
            raise NotFoundError("Bookmark tidak ditemukan")
        return bookmark

    def add(self, db: Session, *, user: User, id_berita: int) -> Bookmark:
        """
        Raises:
            ValidationError: berita does not exist
            ConflictError: berita already bookmarked by this user
        """
        if crud_berita.get(db, id_berita) is None:
            raise ValidationError({"id_berita": ["Berita tidak ditemukan"]})
        if crud_bookmark.get_pair(db, id_user=user.id_user, id_berita=id_berita) is not None:
            raise ConflictError("Berita sudah ada di bookmark")

        try:
            bookmark = crud_bookmark.create(db, obj_in={"id_user": user.id_user, "id_berita": id_berita})
        except IntegrityError:
            raise ConflictError("Berita sudah ada di bookmark")

        logger.info(f"[BOOKMARK] User {user.id_user} bookmarked berita={id_berita}")
        return bookmark

    def remove(self, db: Session, *, user: User, id_bookmark: int) -> None:
        bookmark = self.get_owned(db, user=user, id_bookmark=id_bookmark)
        crud_bookmark.delete(db, id=bookmark.id_bookmark)
        logger.info(f"[BOOKMARK] User {user.id_user} removed bookmark={id_bookmark}")


# Singleton instances
like_service = ReactionService(crud_disukai, "like", notify_author=True)
dislike_service = ReactionService(crud_tidak_disukai, "dislike")
history_service = HistoryService()
bookmark_service = BookmarkService()
