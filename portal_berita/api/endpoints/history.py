"""Reading history endpoints."""

from typing import List, Optional

from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.orm import Session

from portal_berita.api.deps import get_db, get_optional_current_user
from portal_berita.models.history import History
from portal_berita.models.user import User
from portal_berita.schemas.engagement import HistoryCreate, HistoryResponse
from portal_berita.schemas.user import MessageResponse
from portal_berita.services.engagement_service import history_service

router = APIRouter(
    prefix="/history",
    tags=["History"],
)


@router.get(
    "",
    response_model=List[HistoryResponse],
    status_code=status.HTTP_200_OK,
    summary="List history",
)
def list_history(db: Session = Depends(get_db)) -> List[History]:
    """All history rows with user and berita summaries."""
    return history_service.list_all(db)


@router.post(
    "",
    response_model=HistoryResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Record a visit",
    responses={422: {"description": "Unknown user or berita, or no user given"}},
)
def create_history(
    history_in: HistoryCreate,
    current_user: Optional[User] = Depends(get_optional_current_user),
    db: Session = Depends(get_db),
) -> History:
    """Append-only: every visit adds a row."""
    return history_service.record(
        db, id_user=history_in.id_user, id_berita=history_in.id_berita, caller=current_user
    )


@router.get(
    "/user/{id_user}",
    response_model=List[HistoryResponse],
    status_code=status.HTTP_200_OK,
    summary="List history of a user",
    responses={404: {"description": "User has no history"}},
)
def list_history_by_user(
    id_user: int = Path(..., gt=0),
    db: Session = Depends(get_db),
) -> List[History]:
    return history_service.list_by_user(db, id_user)


@router.get(
    "/{id_history}",
    response_model=HistoryResponse,
    status_code=status.HTTP_200_OK,
    summary="Get history by ID",
    responses={404: {"description": "History not found"}},
)
def get_history(
    id_history: int = Path(..., gt=0),
    db: Session = Depends(get_db),
) -> History:
    return history_service.get(db, id_history)


@router.delete(
    "/{id_history}",
    response_model=MessageResponse,
    status_code=status.HTTP_200_OK,
    summary="Delete history",
    responses={404: {"description": "History not found"}},
)
def delete_history(
    id_history: int = Path(..., gt=0),
    db: Session = Depends(get_db),
) -> MessageResponse:
    history_service.delete(db, id_history=id_history)
    return MessageResponse(message="History berhasil dihapus")
