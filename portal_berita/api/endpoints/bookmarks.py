"""Bookmark endpoints. Every route is scoped to the authenticated user."""

from typing import List

from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.orm import Session

from portal_berita.api.deps import get_current_user, get_db
from portal_berita.models.bookmark import Bookmark
from portal_berita.models.user import User
from portal_berita.schemas.engagement import BookmarkCreate, BookmarkResponse
from portal_berita.schemas.user import MessageResponse
from portal_berita.services.engagement_service import bookmark_service

router = APIRouter(
    prefix="/bookmarks",
    tags=["Bookmarks"],
)


@router.get(
    "",
    response_model=List[BookmarkResponse],
    status_code=status.HTTP_200_OK,
    summary="List my bookmarks",
    responses={401: {"description": "Not authenticated"}},
)
def list_bookmarks(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> List[Bookmark]:
    return bookmark_service.list_for_user(db, user=current_user)


@router.post(
    "",
    response_model=BookmarkResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Bookmark a berita",
    responses={
        400: {"description": "Already bookmarked"},
        401: {"description": "Not authenticated"},
        422: {"description": "Berita not found"},
    },
)
def create_bookmark(
    bookmark_in: BookmarkCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> Bookmark:
    return bookmark_service.add(db, user=current_user, id_berita=bookmark_in.id_berita)


@router.get(
    "/{id_bookmark}",
    response_model=BookmarkResponse,
    status_code=status.HTTP_200_OK,
    summary="Get my bookmark",
    responses={
        401: {"description": "Not authenticated"},
        404: {"description": "Bookmark not found or not yours"},
    },
)
def get_bookmark(
    id_bookmark: int = Path(..., gt=0),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> Bookmark:
    return bookmark_service.get_owned(db, user=current_user, id_bookmark=id_bookmark)


@router.delete(
    "/{id_bookmark}",
    response_model=MessageResponse,
    status_code=status.HTTP_200_OK,
    summary="Remove bookmark",
    responses={
        401: {"description": "Not authenticated"},
        404: {"description": "Bookmark not found or not yours"},
    },
)
def delete_bookmark(
    id_bookmark: int = Path(..., gt=0),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> MessageResponse:
    bookmark_service.remove(db, user=current_user, id_bookmark=id_bookmark)
    return MessageResponse(message="Bookmark berhasil dihapus")
