"""TidakDisukai (dislike) model."""

from sqlalchemy import Boolean, Column, ForeignKey, Integer, TIMESTAMP, UniqueConstraint
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from ..database import Base


class TidakDisukai(Base):
    """Model untuk dislike pada berita."""
    
    __tablename__ = "tidak_disukai"
    
    id_tidaksuka = Column(Integer, primary_key=True, index=True)
    
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
    
    tidak_suka = Column(Boolean, nullable=True)  # default null
    
    # Timestamps
    created_at = Column(TIMESTAMP, server_default=func.now())
    updated_at = Column(TIMESTAMP, server_default=func.now(), onupdate=func.now())
    
    __table_args__ = (
        UniqueConstraint("id_user", "id_berita", name="uq_tidak_disukai_user_berita"),
    )
    
    # Relationships
    user = relationship("User", back_populates="dislikes")
    berita = relationship("Berita", back_populates="dislikes")
