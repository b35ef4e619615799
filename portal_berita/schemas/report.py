"""Pydantic schemas for Report."""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from portal_berita.models.enums import ReportReason, ReportStatus


class ReportCreate(BaseModel):
    id_berita: int = Field(..., gt=0)
    reason: ReportReason
    description: Optional[str] = Field(None, max_length=500)

    model_config = ConfigDict(json_schema_extra={
        "example": {
            "id_berita": 1,
            "reason": "hoax",
            "description": "Sumber berita tidak jelas",
        }
    })


class ReportStatusUpdate(BaseModel):
    status: ReportStatus


class ReportResponse(BaseModel):
    id_report: int
    id_user: int
    id_berita: int
    reason: str
    description: Optional[str] = None
    status: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class ReportUserInfo(BaseModel):
    id_user: int
    name: str
    email: str


class ReportBeritaInfo(BaseModel):
    id_berita: int
    judul: str
    penulis: Optional[str] = None


class ReportDetailResponse(BaseModel):
    id_report: int
    user: Optional[ReportUserInfo] = None
    berita: Optional[ReportBeritaInfo] = None
    reason: str
    description: Optional[str] = None
    status: str
    created_at: Optional[datetime] = None


class ReportEnvelope(BaseModel):
    success: bool = True
    message: str
    data: ReportResponse


class ReportListResponse(BaseModel):
    success: bool = True
    data: List[ReportDetailResponse]
    total: int
