from sqlalchemy import Column, Integer, String, Boolean, TIMESTAMP, ForeignKey, Text, CheckConstraint, Index
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from ..database import Base
from .enums import NotificationType, values_of


class Notification(Base):
    __tablename__ = "notifications"
    
    id_notification = Column(Integer, primary_key=True, index=True)
    
    # Recipient
    id_user = Column(Integer, ForeignKey("users.id_user", ondelete="CASCADE"), nullable=False, index=True)
    
    # Notification Content
    title = Column(String(255), nullable=False)
    message = Column(Text, nullable=False)
    type = Column(String(50), nullable=False, default=NotificationType.SYSTEM.value, index=True)
    
    # Status
    is_read = Column(Boolean, nullable=False, default=False, index=True)
    
    # Timestamps
    created_at = Column(TIMESTAMP, server_default=func.now(), index=True)
    
    # Constraints and Indexes
    __table_args__ = (
        CheckConstraint(
            f"type IN ({values_of(NotificationType)})",
            name="check_notification_type"
        ),
        Index("ix_notifications_user_unread", "id_user", "is_read", "created_at"),
    )
    
    # Relationships
    user = relationship("User", back_populates="notifications")
