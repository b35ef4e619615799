"""Like (disukai) endpoints."""

from typing import List, Optional

from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.orm import Session

from portal_berita.api.deps import get_db, get_optional_current_user
from portal_berita.models.disukai import Disukai
from portal_berita.models.user import User
from portal_berita.schemas.engagement import DisukaiCreate, DisukaiResponse, DisukaiUpdate
from portal_berita.schemas.user import MessageResponse
from portal_berita.services.engagement_service import like_service

router = APIRouter(
    prefix="/likes",
    tags=["Likes"],
)


@router.get(
    "",
    response_model=List[DisukaiResponse],
    status_code=status.HTTP_200_OK,
    summary="List likes",
)
def list_likes(db: Session = Depends(get_db)) -> List[Disukai]:
    return like_service.list_all(db)


@router.get(
    "/true",
    response_model=List[DisukaiResponse],
    status_code=status.HTTP_200_OK,
    summary="List likes with suka = true",
)
def list_true_likes(db: Session = Depends(get_db)) -> List[Disukai]:
    return like_service.list_by_value(db, value=True)


@router.get(
    "/false",
    response_model=List[DisukaiResponse],
    status_code=status.HTTP_200_OK,
    summary="List likes with suka = false",
)
def list_false_likes(db: Session = Depends(get_db)) -> List[Disukai]:
    return like_service.list_by_value(db, value=False)


@router.get(
    "/{id_disukai}",
    response_model=DisukaiResponse,
    status_code=status.HTTP_200_OK,
    summary="Get like by ID",
    responses={404: {"description": "Like not found"}},
)
def get_like(
    id_disukai: int = Path(..., gt=0),
    db: Session = Depends(get_db),
) -> Disukai:
    return like_service.get(db, id_disukai)


@router.post(
    "",
    response_model=DisukaiResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Like a berita",
    responses={422: {"description": "Unknown user or berita, or no user given"}},
)
def create_like(
    like_in: DisukaiCreate,
    current_user: Optional[User] = Depends(get_optional_current_user),
    db: Session = Depends(get_db),
) -> Disukai:
    """
    Record a like. Posting again for the same (user, berita) overwrites the
    existing row instead of adding another one.

    `id_user` may be omitted when a bearer token is sent; `suka` defaults to true.
    """
    return like_service.react(
        db,
        id_user=like_in.id_user,
        id_berita=like_in.id_berita,
        value=like_in.suka,
        caller=current_user,
    )


@router.put(
    "/{id_disukai}",
    response_model=DisukaiResponse,
    status_code=status.HTTP_200_OK,
    summary="Update like",
    responses={404: {"description": "Like not found"}},
)
def update_like(
    like_in: DisukaiUpdate,
    id_disukai: int = Path(..., gt=0),
    db: Session = Depends(get_db),
) -> Disukai:
    return like_service.update(db, id_reaction=id_disukai, value=like_in.suka)


@router.delete(
    "/{id_disukai}",
    response_model=MessageResponse,
    status_code=status.HTTP_200_OK,
    summary="Delete like",
    responses={404: {"description": "Like not found"}},
)
def delete_like(
    id_disukai: int = Path(..., gt=0),
    db: Session = Depends(get_db),
) -> MessageResponse:
    like_service.delete(db, id_reaction=id_disukai)
    return MessageResponse(message="Like berhasil dihapus")
