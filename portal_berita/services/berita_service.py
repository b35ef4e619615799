"""Article (berita) service: CRUD plus the joined views served by /berita and /search."""

import logging
from datetime import date
from typing import Any, Dict, Iterable, List, Optional

from fastapi import UploadFile
from sqlalchemy.orm import Session

from portal_berita.core.exceptions import ForbiddenError, NotFoundError, ValidationError
from portal_berita.crud import crud_berita, crud_kategori, crud_user
from portal_berita.models.berita import Berita
from portal_berita.models.user import User
from portal_berita.schemas.berita import BeritaDetailResponse
from portal_berita.schemas.kategori import KategoriResponse
from portal_berita.schemas.user import PenulisSummary
from portal_berita.utils.file_handler import ImageStorage

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Berita tidak ditemukan"
PREVIEW_LENGTH = 200
UPDATABLE_FIELDS = ("id_user", "id_kategori", "judul", "isi", "tgl_terbit", "is_premium")


class BeritaService:

    # ----- Projection -----
    def _is_locked(self, berita: Berita, viewer: Optional[User]) -> bool:
        if not berita.is_premium:
            return False
        if viewer is None:
            return True
        return not (viewer.is_premium or viewer.is_admin or viewer.id_user == berita.id_user)

    def to_detail(
        self,
        db: Session,
        berita: Berita,
        viewer: Optional[User] = None,
        penulis_cache: Optional[Dict[int, Optional[User]]] = None,
    ) -> BeritaDetailResponse:
        """Project a berita with its kategori and author; author is None if the user is gone."""
        if penulis_cache is not None and berita.id_user in penulis_cache:
            penulis = penulis_cache[berita.id_user]
        else:
            penulis = crud_user.get(db, berita.id_user)
            if penulis_cache is not None:
                penulis_cache[berita.id_user] = penulis

        locked = self._is_locked(berita, viewer)
        isi = berita.isi
        if locked and len(isi) > PREVIEW_LENGTH:
            isi = isi[:PREVIEW_LENGTH] + "..."

        return BeritaDetailResponse(
            id_berita=berita.id_berita,
            id_user=berita.id_user,
            id_kategori=berita.id_kategori,
            judul=berita.judul,
            isi=isi,
            gambar=berita.gambar,
            tgl_terbit=berita.tgl_terbit,
            is_premium=bool(berita.is_premium),
            kategori=KategoriResponse.model_validate(berita.kategori) if berita.kategori else None,
            created_at=berita.created_at,
            updated_at=berita.updated_at,
            penulis=PenulisSummary.model_validate(penulis) if penulis else None,
            is_locked=locked,
        )

    def to_detail_list(
        self, db: Session, items: Iterable[Berita], viewer: Optional[User] = None
    ) -> List[BeritaDetailResponse]:
        cache: Dict[int, Optional[User]] = {}
        return [self.to_detail(db, berita, viewer, cache) for berita in items]

    # ----- Read -----
    def get_or_404(self, db: Session, id_berita: int) -> Berita:
        berita = crud_berita.get(db, id_berita)
        if berita is None:
            raise NotFoundError(NOT_FOUND_MESSAGE)
        return berita

    def list_berita(self, db: Session, viewer: Optional[User] = None) -> List[BeritaDetailResponse]:
        return self.to_detail_list(db, crud_berita.get_multi(db), viewer)

    def get_berita(self, db: Session, id_berita: int, viewer: Optional[User] = None) -> BeritaDetailResponse:
        return self.to_detail(db, self.get_or_404(db, id_berita), viewer)

    def list_by_author(
        self, db: Session, id_user: int, viewer: Optional[User] = None
    ) -> List[BeritaDetailResponse]:
        """
        Raises:
            NotFoundError: the user does not exist (an existing user with no
                berita yields an empty list instead)
        """
        if crud_user.get(db, id_user) is None:
            raise NotFoundError("User tidak ditemukan")
        return self.to_detail_list(db, crud_berita.get_by_user(db, id_user=id_user), viewer)

    def list_by_kategori(
        self, db: Session, id_kategori: int, viewer: Optional[User] = None
    ) -> List[BeritaDetailResponse]:
        return self.to_detail_list(db, crud_berita.get_by_kategori(db, id_kategori=id_kategori), viewer)

    def search(self, db: Session, *, viewer: Optional[User] = None, **filters: Any) -> List[BeritaDetailResponse]:
        date_from, date_to = filters.get("date_from"), filters.get("date_to")
        if date_from and date_to and date_from > date_to:
            raise ValidationError({"date_from": ["date_from tidak boleh setelah date_to"]})
        return self.to_detail_list(db, crud_berita.search(db, **filters), viewer)

    # ----- Write -----
    def _ensure_can_modify(self, actor: User, berita: Berita) -> None:
        if actor.is_admin or actor.id_user == berita.id_user:
            return
        raise ForbiddenError("Anda tidak memiliki akses ke berita ini")

    def _reference_errors(
        self, db: Session, *, id_user: Optional[int], id_kategori: Optional[int]
    ) -> Dict[str, List[str]]:
        errors: Dict[str, List[str]] = {}
        if id_user is not None and crud_user.get(db, id_user) is None:
            errors["id_user"] = ["User tidak ditemukan"]
        if id_kategori is not None and crud_kategori.get(db, id_kategori) is None:
            errors["id_kategori"] = ["Kategori tidak ditemukan"]
        return errors

    def create_berita(
        self,
        db: Session,
        *,
        actor: User,
        storage: ImageStorage,
        id_kategori: int,
        judul: str,
        isi: str,
        tgl_terbit: date,
        id_user: Optional[int] = None,
        is_premium: bool = False,
        gambar: Optional[UploadFile] = None,
    ) -> Berita:
        """
        Create a berita; the author defaults to the actor.

        Raises:
            ForbiddenError: a non-admin posting on behalf of someone else
            ValidationError: unknown author/kategori, or an invalid image
        """
        author_id = id_user if id_user is not None else actor.id_user
        if author_id != actor.id_user and not actor.is_admin:
            raise ForbiddenError("Hanya admin yang dapat membuat berita atas nama user lain")

        errors = self._reference_errors(db, id_user=author_id, id_kategori=id_kategori)
        if errors:
            raise ValidationError(errors)

        data: Dict[str, Any] = {
            "id_user": author_id,
            "id_kategori": id_kategori,
            "judul": judul,
            "isi": isi,
            "tgl_terbit": tgl_terbit,
            "is_premium": is_premium,
        }
        if gambar is not None and gambar.filename:
            data["gambar"] = storage.store(gambar)

        try:
            berita = crud_berita.create(db, obj_in=data)
        except Exception:
            # Row insert failed: the freshly stored image would be orphaned
            storage.delete(data.get("gambar"))
            raise

        logger.info(f"[BERITA] Created id={berita.id_berita} by user={actor.id_user}")
        return berita

    def update_berita(
        self,
        db: Session,
        *,
        actor: User,
        storage: ImageStorage,
        id_berita: int,
        fields: Dict[str, Any],
        gambar: Optional[UploadFile] = None,
    ) -> Berita:
        """
        Partial update. A new image replaces the old blob (best effort,
        not transactional with the row update).

        Raises:
            NotFoundError: berita does not exist
            ForbiddenError: actor is neither admin nor the author, or a
                non-admin tries to reassign the author
            ValidationError: unknown author/kategori, or an invalid image
        """
        berita = self.get_or_404(db, id_berita)
        self._ensure_can_modify(actor, berita)

        changes = {key: value for key, value in fields.items() if key in UPDATABLE_FIELDS and value is not None}
        if "id_user" in changes and changes["id_user"] != berita.id_user and not actor.is_admin:
            raise ForbiddenError("Hanya admin yang dapat memindahkan penulis berita")

        errors = self._reference_errors(
            db, id_user=changes.get("id_user"), id_kategori=changes.get("id_kategori")
        )
        if errors:
            raise ValidationError(errors)

        if gambar is not None and gambar.filename:
            # Validate before touching the old blob so a bad upload keeps the current image
            storage.validate(gambar)
            if berita.gambar and storage.exists(berita.gambar):
                storage.delete(berita.gambar)
            changes["gambar"] = storage.store(gambar)

        berita = crud_berita.update(db, db_obj=berita, obj_in=changes)
        logger.info(f"[BERITA] Updated id={berita.id_berita} fields={sorted(changes)} by user={actor.id_user}")
        return berita

    def delete_berita(self, db: Session, *, actor: User, storage: ImageStorage, id_berita: int) -> None:
        """
        Delete the stored image (if any) and then the row.

        Raises:
            NotFoundError: berita does not exist
            ForbiddenError: actor is neither admin nor the author
        """
        berita = self.get_or_404(db, id_berita)
        self._ensure_can_modify(actor, berita)

        if berita.gambar and storage.exists(berita.gambar):
            storage.delete(berita.gambar)

        crud_berita.delete(db, id=berita.id_berita)
        logger.info(f"[BERITA] Deleted id={id_berita} by user={actor.id_user}")


# Singleton instance
berita_service = BeritaService()
