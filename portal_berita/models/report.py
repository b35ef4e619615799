"""Report model untuk laporan berita bermasalah."""

from sqlalchemy import CheckConstraint, Column, ForeignKey, Integer, String, TIMESTAMP, UniqueConstraint
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from ..database import Base
from .enums import ReportReason, ReportStatus, values_of


class Report(Base):
    __tablename__ = "reports"
    
    id_report = Column(Integer, primary_key=True, index=True)
    id_user = Column(Integer, ForeignKey("users.id_user", ondelete="CASCADE"), nullable=False, index=True)
    id_berita = Column(Integer, ForeignKey("berita.id_berita", ondelete="CASCADE"), nullable=False, index=True)
    
    reason = Column(String(50), nullable=False)
    description = Column(String(500), nullable=True)
    status = Column(String(20), nullable=False, default=ReportStatus.PENDING.value, index=True)
    
    created_at = Column(TIMESTAMP, server_default=func.now(), index=True)
    updated_at = Column(TIMESTAMP, server_default=func.now(), onupdate=func.now())
    
    __table_args__ = (
        # Satu laporan per (user, berita)
        UniqueConstraint("id_user", "id_berita", name="uq_report_user_berita"),
        CheckConstraint(f"reason IN ({values_of(ReportReason)})", name="check_report_reason"),
        CheckConstraint(f"status IN ({values_of(ReportStatus)})", name="check_report_status"),
    )
    
    user = relationship("User", back_populates="reports")
    berita = relationship("Berita", back_populates="reports")
