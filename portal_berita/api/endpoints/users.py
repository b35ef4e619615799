"""User endpoints."""

from typing import List

from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.orm import Session

from portal_berita.api.deps import get_current_user, get_db
from portal_berita.models.user import User
from portal_berita.schemas.user import MessageResponse, UserResponse, UserUpdate
from portal_berita.services.user_service import user_service

router = APIRouter(
    prefix="/users",
    tags=["Users"],
)


@router.get(
    "",
    response_model=List[UserResponse],
    status_code=status.HTTP_200_OK,
    summary="List all users",
)
def list_users(db: Session = Depends(get_db)) -> List[User]:
    """Public projection of every user. Password hashes are never included."""
    return user_service.list_users(db)


@router.get(
    "/{id_user}",
    response_model=UserResponse,
    status_code=status.HTTP_200_OK,
    summary="Get user by ID",
    responses={404: {"description": "User not found"}},
)
def get_user(
    id_user: int = Path(..., gt=0),
    db: Session = Depends(get_db),
) -> User:
    return user_service.get_user(db, id_user)


@router.put(
    "/{id_user}",
    response_model=UserResponse,
    status_code=status.HTTP_200_OK,
    summary="Update user",
    responses={
        400: {"description": "Old password does not match"},
        401: {"description": "Not authenticated"},
        403: {"description": "Not the user and not an admin"},
        404: {"description": "User not found"},
        422: {"description": "Validation failed or username/email already taken"},
    },
)
def update_user(
    user_update: UserUpdate,
    id_user: int = Path(..., gt=0),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> User:
    """
    Partially update a user (self or admin).

    To change the password send both `old_password` and `new_password`.
    """
    return user_service.update_user(db, actor=current_user, id_user=id_user, user_in=user_update)


@router.delete(
    "/{id_user}",
    response_model=MessageResponse,
    status_code=status.HTTP_200_OK,
    summary="Delete user",
    responses={
        401: {"description": "Not authenticated"},
        403: {"description": "Not the user and not an admin"},
        404: {"description": "User not found"},
    },
)
def delete_user(
    id_user: int = Path(..., gt=0),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> MessageResponse:
    """Hard delete. Articles written by the user stay and show a null penulis."""
    user_service.delete_user(db, actor=current_user, id_user=id_user)
    return MessageResponse(message="User berhasil dihapus")
