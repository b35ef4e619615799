"""Dislike (tidak_disukai) endpoints. Independent of likes: a user may hold both."""

from typing import List, Optional

from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.orm import Session

from portal_berita.api.deps import get_db, get_optional_current_user
from portal_berita.models.tidak_disukai import TidakDisukai
from portal_berita.models.user import User
from portal_berita.schemas.engagement import TidakDisukaiCreate, TidakDisukaiResponse, TidakDisukaiUpdate
from portal_berita.schemas.user import MessageResponse
from portal_berita.services.engagement_service import dislike_service

router = APIRouter(
    prefix="/dislikes",
    tags=["Dislikes"],
)


@router.get(
    "",
    response_model=List[TidakDisukaiResponse],
    status_code=status.HTTP_200_OK,
    summary="List dislikes",
)
def list_dislikes(db: Session = Depends(get_db)) -> List[TidakDisukai]:
    return dislike_service.list_all(db)


@router.get(
    "/true",
    response_model=List[TidakDisukaiResponse],
    status_code=status.HTTP_200_OK,
    summary="List dislikes with tidak_suka = true",
)
def list_true_dislikes(db: Session = Depends(get_db)) -> List[TidakDisukai]:
    return dislike_service.list_by_value(db, value=True)


@router.get(
    "/false",
    response_model=List[TidakDisukaiResponse],
    status_code=status.HTTP_200_OK,
    summary="List dislikes with tidak_suka = false",
)
def list_false_dislikes(db: Session = Depends(get_db)) -> List[TidakDisukai]:
    return dislike_service.list_by_value(db, value=False)


@router.get(
    "/{id_tidaksuka}",
    response_model=TidakDisukaiResponse,
    status_code=status.HTTP_200_OK,
    summary="Get dislike by ID",
    responses={404: {"description": "Dislike not found"}},
)
def get_dislike(
    id_tidaksuka: int = Path(..., gt=0),
    db: Session = Depends(get_db),
) -> TidakDisukai:
    return dislike_service.get(db, id_tidaksuka)


@router.post(
    "",
    response_model=TidakDisukaiResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Dislike a berita",
    responses={422: {"description": "Unknown user or berita, or no user given"}},
)
def create_dislike(
    dislike_in: TidakDisukaiCreate,
    current_user: Optional[User] = Depends(get_optional_current_user),
    db: Session = Depends(get_db),
) -> TidakDisukai:
    return dislike_service.react(
        db,
        id_user=dislike_in.id_user,
        id_berita=dislike_in.id_berita,
        value=dislike_in.tidak_suka,
        caller=current_user,
    )


@router.put(
    "/{id_tidaksuka}",
    response_model=TidakDisukaiResponse,
    status_code=status.HTTP_200_OK,
    summary="Update dislike",
    responses={404: {"description": "Dislike not found"}},
)
def update_dislike(
    dislike_in: TidakDisukaiUpdate,
    id_tidaksuka: int = Path(..., gt=0),
    db: Session = Depends(get_db),
) -> TidakDisukai:
    return dislike_service.update(db, id_reaction=id_tidaksuka, value=dislike_in.tidak_suka)


@router.delete(
    "/{id_tidaksuka}",
    response_model=MessageResponse,
    status_code=status.HTTP_200_OK,
    summary="Delete dislike",
    responses={404: {"description": "Dislike not found"}},
)
def delete_dislike(
    id_tidaksuka: int = Path(..., gt=0),
    db: Session = Depends(get_db),
) -> MessageResponse:
    dislike_service.delete(db, id_reaction=id_tidaksuka)
    return MessageResponse(message="Dislike berhasil dihapus")
