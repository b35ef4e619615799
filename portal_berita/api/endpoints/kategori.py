"""Kategori endpoints."""

import logging
from typing import List

from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from portal_berita.api.deps import get_db, require_role
from portal_berita.core.exceptions import ConflictError, NotFoundError, ValidationError
from portal_berita.crud import crud_kategori
from portal_berita.models.enums import Role
from portal_berita.models.kategori import Kategori
from portal_berita.models.user import User
from portal_berita.schemas.kategori import KategoriCreate, KategoriResponse, KategoriUpdate
from portal_berita.schemas.user import MessageResponse

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/kategori",
    tags=["Kategori"],
)

NOT_FOUND_MESSAGE = "Kategori tidak ditemukan"
DUPLICATE_ERRORS = {"kategori": ["Kategori sudah ada"]}


def _get_or_404(db: Session, id_kategori: int) -> Kategori:
    kategori = crud_kategori.get(db, id_kategori)
    if kategori is None:
        raise NotFoundError(NOT_FOUND_MESSAGE)
    return kategori


@router.get(
    "",
    response_model=List[KategoriResponse],
    status_code=status.HTTP_200_OK,
    summary="List kategori",
)
def list_kategori(db: Session = Depends(get_db)) -> List[Kategori]:
    return crud_kategori.get_multi(db)


@router.get(
    "/{id_kategori}",
    response_model=KategoriResponse,
    status_code=status.HTTP_200_OK,
    summary="Get kategori by ID",
    responses={404: {"description": "Kategori not found"}},
)
def get_kategori(
    id_kategori: int = Path(..., gt=0),
    db: Session = Depends(get_db),
) -> Kategori:
    return _get_or_404(db, id_kategori)


@router.post(
    "",
    response_model=KategoriResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create kategori",
    responses={
        401: {"description": "Not authenticated"},
        403: {"description": "Only admin or penulis"},
        422: {"description": "Name missing, too long, or already used"},
    },
)
def create_kategori(
    kategori_in: KategoriCreate,
    current_user: User = Depends(require_role(Role.ADMIN.value, Role.PENULIS.value)),
    db: Session = Depends(get_db),
) -> Kategori:
    if crud_kategori.get_by_name(db, name=kategori_in.kategori):
        raise ValidationError(DUPLICATE_ERRORS)

    try:
        kategori = crud_kategori.create(db, obj_in=kategori_in)
    except IntegrityError:
        raise ValidationError(DUPLICATE_ERRORS)

    logger.info(f"[KATEGORI] Created id={kategori.id_kategori} by user={current_user.id_user}")
    return kategori


@router.put(
    "/{id_kategori}",
    response_model=KategoriResponse,
    status_code=status.HTTP_200_OK,
    summary="Rename kategori",
    responses={
        401: {"description": "Not authenticated"},
        403: {"description": "Only admin or penulis"},
        404: {"description": "Kategori not found"},
        422: {"description": "Name missing, too long, or already used"},
    },
)
def update_kategori(
    kategori_in: KategoriUpdate,
    id_kategori: int = Path(..., gt=0),
    current_user: User = Depends(require_role(Role.ADMIN.value, Role.PENULIS.value)),
    db: Session = Depends(get_db),
) -> Kategori:
    kategori = _get_or_404(db, id_kategori)

    existing = crud_kategori.get_by_name(db, name=kategori_in.kategori)
    if existing is not None and existing.id_kategori != kategori.id_kategori:
        raise ValidationError(DUPLICATE_ERRORS)

    try:
        kategori = crud_kategori.update(db, db_obj=kategori, obj_in=kategori_in)
    except IntegrityError:
        raise ValidationError(DUPLICATE_ERRORS)

    logger.info(f"[KATEGORI] Updated id={kategori.id_kategori} by user={current_user.id_user}")
    return kategori


@router.delete(
    "/{id_kategori}",
    response_model=MessageResponse,
    status_code=status.HTTP_200_OK,
    summary="Delete kategori",
    responses={
        400: {"description": "Kategori still used by berita"},
        401: {"description": "Not authenticated"},
        403: {"description": "Admin only"},
        404: {"description": "Kategori not found"},
    },
)
def delete_kategori(
    id_kategori: int = Path(..., gt=0),
    current_user: User = Depends(require_role(Role.ADMIN.value)),
    db: Session = Depends(get_db),
) -> MessageResponse:
    kategori = _get_or_404(db, id_kategori)
    if crud_kategori.is_in_use(db, id_kategori=kategori.id_kategori):
        raise ConflictError("Kategori masih digunakan oleh berita")

    crud_kategori.delete(db, id=kategori.id_kategori)
    logger.info(f"[KATEGORI] Deleted id={id_kategori} by user={current_user.id_user}")
    return MessageResponse(message="Kategori berhasil dihapus")
