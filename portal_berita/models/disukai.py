"""Disukai (like) model."""

from sqlalchemy import Boolean, Column, ForeignKey, Integer, TIMESTAMP, UniqueConstraint
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from ..database import Base


class Disukai(Base):
    """Model untuk like pada berita."""
    
    __tablename__ = "disukai"
    
    id_disukai = Column(Integer, primary_key=True, index=True)
    
    # Foreign Keys
    id_user = Column(
        Integer,
        ForeignKey("users.id_user", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
    id_berita = Column(
        Integer,
        ForeignKey("berita.id_berita", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
    
    suka = Column(Boolean, nullable=True)
    
    # Timestamps
    created_at = Column(TIMESTAMP, server_default=func.now())
    updated_at = Column(TIMESTAMP, server_default=func.now(), onupdate=func.now())
    
    # Constraints
    __table_args__ = (
        # Satu baris like per (user, berita)
        UniqueConstraint("id_user", "id_berita", name="uq_disukai_user_berita"),
    )
    
    # Relationships
    user = relationship("User", back_populates="likes")
    berita = relationship("Berita", back_populates="likes")
