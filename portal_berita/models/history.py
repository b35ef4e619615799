from sqlalchemy import Column, ForeignKey, Index, Integer, TIMESTAMP
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from ..database import Base


class History(Base):
    """Riwayat baca. Append-only, satu baris per kunjungan."""
    
    __tablename__ = "history"
    
    id_history = Column(Integer, primary_key=True, index=True)
    id_user = Column(Integer, ForeignKey("users.id_user", ondelete="CASCADE"), nullable=False, index=True)
    id_berita = Column(Integer, ForeignKey("berita.id_berita", ondelete="CASCADE"), nullable=False, index=True)
    
    created_at = Column(TIMESTAMP, server_default=func.now(), index=True)
    
    __table_args__ = (
        Index("idx_history_user_created", "id_user", "created_at"),
    )
    
    user = relationship("User", back_populates="history")
    berita = relationship("Berita", back_populates="history")
