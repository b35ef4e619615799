"""Analytics schemas for dashboard data."""

from typing import Dict, List

from pydantic import BaseModel, Field


class DashboardResponse(BaseModel):
    """Response schema for the admin dashboard."""
    
    total_users: int = Field(..., description="Total user terdaftar")
    total_berita: int = Field(..., description="Total berita")
    total_kategori: int = Field(..., description="Total kategori")
    total_likes: int = Field(..., description="Total like bernilai true")
    total_dislikes: int = Field(..., description="Total dislike bernilai true")
    total_views: int = Field(..., description="Total baris history (kunjungan)")
    total_reports_pending: int = Field(..., description="Total laporan yang masih pending")


class UserAnalyticsResponse(BaseModel):
    total_users: int
    by_role: Dict[str, int]
    by_membership: Dict[str, int]


class BeritaStats(BaseModel):
    id_berita: int
    judul: str
    likes: int
    dislikes: int
    views: int


class ContentAnalyticsResponse(BaseModel):
    total_berita: int
    total_likes: int
    total_dislikes: int
    total_views: int
    berita: List[BeritaStats]
    per_kategori: Dict[str, int]
