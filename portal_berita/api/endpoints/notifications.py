"""Notification endpoints for the authenticated user."""

from typing import Optional

from fastapi import APIRouter, Depends, Path, Query, status
from sqlalchemy.orm import Session

from portal_berita.api.deps import get_current_user, get_db
from portal_berita.models.user import User
from portal_berita.schemas.notification import NotificationListResponse, NotificationResponse
from portal_berita.schemas.user import MessageResponse
from portal_berita.services.notification_service import notification_service

router = APIRouter(
    prefix="/notifications",
    tags=["Notifications"],
)


@router.get(
    "",
    response_model=NotificationListResponse,
    status_code=status.HTTP_200_OK,
    summary="List notifications",
    description="""
    Get notifications of the current user, newest first.

    **Filters:**
    - `read`: true = read only, false = unread only, omit = all

    `unread_count` counts the unread items among the returned ones.
    """,
    responses={401: {"description": "Not authenticated"}},
)
def list_notifications(
    read: Optional[bool] = Query(None, description="Filter by read status"),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> NotificationListResponse:
    notifications = notification_service.list_for_user(db, user=current_user, is_read=read)

    return NotificationListResponse(
        data=[NotificationResponse.model_validate(n) for n in notifications],
        total=len(notifications),
        unread_count=sum(1 for n in notifications if not n.is_read),
    )


@router.put(
    "/read-all",
    response_model=MessageResponse,
    status_code=status.HTTP_200_OK,
    summary="Mark all notifications as read",
    responses={401: {"description": "Not authenticated"}},
)
def mark_all_notifications_as_read(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> MessageResponse:
    notification_service.mark_all_read(db, user=current_user)
    return MessageResponse(message="Semua notifikasi berhasil ditandai sebagai sudah dibaca")


@router.put(
    "/{id_notification}/read",
    response_model=MessageResponse,
    status_code=status.HTTP_200_OK,
    summary="Mark notification as read",
    responses={
        401: {"description": "Not authenticated"},
        404: {"description": "Notification not found or not yours"},
    },
)
def mark_notification_as_read(
    id_notification: int = Path(..., gt=0),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> MessageResponse:
    notification_service.mark_read(db, user=current_user, id_notification=id_notification)
    return MessageResponse(message="Notifikasi berhasil ditandai sebagai sudah dibaca")


@router.delete(
    "/{id_notification}",
    response_model=MessageResponse,
    status_code=status.HTTP_200_OK,
    summary="Delete notification",
    responses={
        401: {"description": "Not authenticated"},
        404: {"description": "Notification not found or not yours"},
    },
)
def delete_notification(
    id_notification: int = Path(..., gt=0),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> MessageResponse:
    notification_service.delete(db, user=current_user, id_notification=id_notification)
    return MessageResponse(message="Notifikasi berhasil dihapus")
