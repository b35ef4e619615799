"""Berita (news article) model."""

from sqlalchemy import Boolean, Column, Date, ForeignKey, Index, Integer, String, Text, TIMESTAMP
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from ..database import Base


class Berita(Base):
    """Model untuk berita yang diterbitkan penulis."""
    
    __tablename__ = "berita"
    
    id_berita = Column(Integer, primary_key=True, index=True)
    
    # Penulis sengaja tanpa FK: berita tetap ada walau user-nya sudah dihapus
    id_user = Column(Integer, nullable=False, index=True)
    id_kategori = Column(
        Integer,
        ForeignKey("kategori.id_kategori"),
        nullable=False,
        index=True
    )
    
    # Content
    judul = Column(String(255), nullable=False)
    isi = Column(Text, nullable=False)
    gambar = Column(String(500), nullable=True)  # path relatif di storage, contoh: berita/1700000000_foto.jpg
    tgl_terbit = Column(Date, nullable=False, index=True)
    is_premium = Column(Boolean, nullable=False, default=False)
    
    # Timestamps
    created_at = Column(TIMESTAMP, server_default=func.now())
    updated_at = Column(TIMESTAMP, server_default=func.now(), onupdate=func.now())
    
    __table_args__ = (
        Index("idx_berita_user_terbit", "id_user", "tgl_terbit"),
        Index("idx_berita_kategori_terbit", "id_kategori", "tgl_terbit"),
    )
    
    # Relationships
    kategori = relationship("Kategori", back_populates="berita", lazy="joined")
    likes = relationship("Disukai", back_populates="berita", cascade="all, delete-orphan")
    dislikes = relationship("TidakDisukai", back_populates="berita", cascade="all, delete-orphan")
    history = relationship("History", back_populates="berita", cascade="all, delete-orphan")
    bookmarks = relationship("Bookmark", back_populates="berita", cascade="all, delete-orphan")
    reports = relationship("Report", back_populates="berita", cascade="all, delete-orphan")
