"""Search endpoints."""

from datetime import date
from typing import Literal, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from portal_berita.api.deps import get_db, get_optional_current_user
from portal_berita.models.user import User
from portal_berita.schemas.berita import BeritaSearchResponse
from portal_berita.services.berita_service import berita_service

router = APIRouter(
    prefix="/search",
    tags=["Search"],
)


@router.get(
    "",
    response_model=BeritaSearchResponse,
    status_code=status.HTTP_200_OK,
    summary="Search berita",
)
def search(
    q: Optional[str] = Query(None, max_length=255, description="Kata kunci pada judul atau isi"),
    viewer: Optional[User] = Depends(get_optional_current_user),
    db: Session = Depends(get_db),
) -> BeritaSearchResponse:
    """Case-insensitive substring match on judul and isi, newest first."""
    items = berita_service.search(db, viewer=viewer, q=q)
    return BeritaSearchResponse(data=items, total=len(items))


@router.get(
    "/advanced",
    response_model=BeritaSearchResponse,
    status_code=status.HTTP_200_OK,
    summary="Search berita with filters",
    responses={422: {"description": "Invalid filter, or date_from after date_to"}},
)
def advanced_search(
    q: Optional[str] = Query(None, max_length=255),
    id_kategori: Optional[int] = Query(None, gt=0),
    id_user: Optional[int] = Query(None, gt=0),
    date_from: Optional[date] = Query(None, description="tgl_terbit >= date_from"),
    date_to: Optional[date] = Query(None, description="tgl_terbit <= date_to"),
    is_premium: Optional[bool] = Query(None),
    sort: Literal["terbaru", "terlama", "judul"] = Query("terbaru"),
    skip: int = Query(0, ge=0),
    limit: int = Query(50, ge=1, le=100),
    viewer: Optional[User] = Depends(get_optional_current_user),
    db: Session = Depends(get_db),
) -> BeritaSearchResponse:
    items = berita_service.search(
        db,
        viewer=viewer,
        q=q,
        id_kategori=id_kategori,
        id_user=id_user,
        date_from=date_from,
        date_to=date_to,
        is_premium=is_premium,
        sort=sort,
        skip=skip,
        limit=limit,
    )
    return BeritaSearchResponse(data=items, total=len(items))
