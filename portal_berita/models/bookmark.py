from sqlalchemy import Column, ForeignKey, Integer, TIMESTAMP, UniqueConstraint
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from ..database import Base


class Bookmark(Base):
    __tablename__ = "bookmarks"
    
    id_bookmark = Column(Integer, primary_key=True, index=True)
    id_user = Column(Integer, ForeignKey("users.id_user", ondelete="CASCADE"), nullable=False, index=True)
    id_berita = Column(Integer, ForeignKey("berita.id_berita", ondelete="CASCADE"), nullable=False, index=True)
    
    created_at = Column(TIMESTAMP, server_default=func.now())
    
    __table_args__ = (
        UniqueConstraint("id_user", "id_berita", name="uq_bookmark_user_berita"),
    )
    
    user = relationship("User", back_populates="bookmarks")
    berita = relationship("Berita", back_populates="bookmarks")
