"""Berita (news article) endpoints.

Write endpoints take multipart form data so an image can be uploaded in the
same request. Static paths (`/search`, `/user/{id}`, `/category/{id}`) are
registered before `/{id_berita}`.
"""

from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, Path, Query, UploadFile, status
from sqlalchemy.orm import Session

from portal_berita.api.deps import get_current_user, get_db, get_optional_current_user, require_role
from portal_berita.models.enums import Role
from portal_berita.models.user import User
from portal_berita.schemas.berita import BeritaDetailResponse
from portal_berita.schemas.user import MessageResponse
from portal_berita.services.berita_service import berita_service
from portal_berita.utils.file_handler import ImageStorage, get_storage

router = APIRouter(
    prefix="/berita",
    tags=["Berita"],
)


@router.get(
    "",
    response_model=List[BeritaDetailResponse],
    status_code=status.HTTP_200_OK,
    summary="List berita",
)
def list_berita(
    viewer: Optional[User] = Depends(get_optional_current_user),
    db: Session = Depends(get_db),
) -> List[BeritaDetailResponse]:
    """
    Every berita with its kategori and penulis.

    Premium berita show only a preview of `isi` (and `is_locked: true`)
    unless the caller is premium, admin, or the author.
    """
    return berita_service.list_berita(db, viewer)


@router.get(
    "/search",
    response_model=List[BeritaDetailResponse],
    status_code=status.HTTP_200_OK,
    summary="Search berita by keyword",
)
def search_berita(
    q: Optional[str] = Query(None, max_length=255, description="Kata kunci pada judul atau isi"),
    viewer: Optional[User] = Depends(get_optional_current_user),
    db: Session = Depends(get_db),
) -> List[BeritaDetailResponse]:
    return berita_service.search(db, viewer=viewer, q=q)


@router.get(
    "/user/{id_user}",
    response_model=List[BeritaDetailResponse],
    status_code=status.HTTP_200_OK,
    summary="List berita by author",
    responses={404: {"description": "User not found"}},
)
def list_berita_by_user(
    id_user: int = Path(..., gt=0),
    viewer: Optional[User] = Depends(get_optional_current_user),
    db: Session = Depends(get_db),
) -> List[BeritaDetailResponse]:
    return berita_service.list_by_author(db, id_user, viewer)


@router.get(
    "/category/{id_kategori}",
    response_model=List[BeritaDetailResponse],
    status_code=status.HTTP_200_OK,
    summary="List berita by kategori",
)
def list_berita_by_kategori(
    id_kategori: int = Path(..., gt=0),
    viewer: Optional[User] = Depends(get_optional_current_user),
    db: Session = Depends(get_db),
) -> List[BeritaDetailResponse]:
    return berita_service.list_by_kategori(db, id_kategori, viewer)


@router.get(
    "/{id_berita}",
    response_model=BeritaDetailResponse,
    status_code=status.HTTP_200_OK,
    summary="Get berita by ID",
    responses={404: {"description": "Berita not found"}},
)
def get_berita(
    id_berita: int = Path(..., gt=0),
    viewer: Optional[User] = Depends(get_optional_current_user),
    db: Session = Depends(get_db),
) -> BeritaDetailResponse:
    return berita_service.get_berita(db, id_berita, viewer)


@router.post(
    "",
    response_model=BeritaDetailResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create berita",
    responses={
        401: {"description": "Not authenticated"},
        403: {"description": "Only admin or penulis; only admin may post for another user"},
        422: {"description": "Invalid form data, unknown user/kategori, or invalid image"},
    },
)
def create_berita(
    id_kategori: int = Form(..., gt=0),
    judul: str = Form(..., min_length=1, max_length=255),
    isi: str = Form(..., min_length=1),
    tgl_terbit: date = Form(...),
    id_user: Optional[int] = Form(None, gt=0),
    is_premium: bool = Form(False),
    gambar: Optional[UploadFile] = File(None, description="jpeg/png/jpg/gif, maksimal 2048 KB"),
    current_user: User = Depends(require_role(Role.ADMIN.value, Role.PENULIS.value)),
    storage: ImageStorage = Depends(get_storage),
    db: Session = Depends(get_db),
) -> BeritaDetailResponse:
    """
    Create a berita. `id_user` defaults to the caller.

    The image is stored as `berita/{unix_timestamp}_{original_name}` and
    served under the public storage prefix.
    """
    berita = berita_service.create_berita(
        db,
        actor=current_user,
        storage=storage,
        id_user=id_user,
        id_kategori=id_kategori,
        judul=judul,
        isi=isi,
        tgl_terbit=tgl_terbit,
        is_premium=is_premium,
        gambar=gambar,
    )
    return berita_service.to_detail(db, berita, current_user)


@router.api_route(
    "/{id_berita}",
    methods=["PUT", "PATCH", "POST"],
    response_model=BeritaDetailResponse,
    status_code=status.HTTP_200_OK,
    summary="Update berita",
    responses={
        401: {"description": "Not authenticated"},
        403: {"description": "Neither admin nor the author"},
        404: {"description": "Berita not found"},
        422: {"description": "Invalid form data, unknown user/kategori, or invalid image"},
    },
)
def update_berita(
    id_berita: int = Path(..., gt=0),
    id_user: Optional[int] = Form(None, gt=0),
    id_kategori: Optional[int] = Form(None, gt=0),
    judul: Optional[str] = Form(None, min_length=1, max_length=255),
    isi: Optional[str] = Form(None, min_length=1),
    tgl_terbit: Optional[date] = Form(None),
    is_premium: Optional[bool] = Form(None),
    gambar: Optional[UploadFile] = File(None),
    current_user: User = Depends(get_current_user),
    storage: ImageStorage = Depends(get_storage),
    db: Session = Depends(get_db),
) -> BeritaDetailResponse:
    """
    Partially update a berita (admin or the author). Accepts PUT, PATCH, and
    POST so multipart clients that cannot send PUT bodies still work.

    A new image replaces the old one; the old file is removed first.
    """
    fields = {
        "id_user": id_user,
        "id_kategori": id_kategori,
        "judul": judul,
        "isi": isi,
        "tgl_terbit": tgl_terbit,
        "is_premium": is_premium,
    }
    berita = berita_service.update_berita(
        db,
        actor=current_user,
        storage=storage,
        id_berita=id_berita,
        fields=fields,
        gambar=gambar,
    )
    return berita_service.to_detail(db, berita, current_user)


@router.delete(
    "/{id_berita}",
    response_model=MessageResponse,
    status_code=status.HTTP_200_OK,
    summary="Delete berita",
    responses={
        401: {"description": "Not authenticated"},
        403: {"description": "Neither admin nor the author"},
        404: {"description": "Berita not found"},
    },
)
def delete_berita(
    id_berita: int = Path(..., gt=0),
    current_user: User = Depends(get_current_user),
    storage: ImageStorage = Depends(get_storage),
    db: Session = Depends(get_db),
) -> MessageResponse:
    berita_service.delete_berita(db, actor=current_user, storage=storage, id_berita=id_berita)
    return MessageResponse(message="Berita berhasil dihapus")
