"""Kategori model for grouping berita."""

from sqlalchemy import Column, Integer, String, TIMESTAMP
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from ..database import Base


class Kategori(Base):
    """Model untuk kategori berita."""
    
    __tablename__ = "kategori"
    
    id_kategori = Column(Integer, primary_key=True, index=True)
    kategori = Column(String(255), nullable=False, unique=True, index=True)
    
    # Timestamps
    created_at = Column(TIMESTAMP, server_default=func.now())
    updated_at = Column(TIMESTAMP, server_default=func.now(), onupdate=func.now())
    
    # Relationships
    berita = relationship("Berita", back_populates="kategori")
