"""Pydantic schemas for `Notification` domain objects."""

from datetime import datetime
from typing import List

from pydantic import BaseModel, ConfigDict


class NotificationResponse(BaseModel):
    id_notification: int
    id_user: int
    title: str
    message: str
    type: str
    is_read: bool
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class NotificationListResponse(BaseModel):
    success: bool = True
    data: List[NotificationResponse]
    total: int
    unread_count: int
