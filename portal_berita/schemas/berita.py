"""Pydantic schemas for Berita."""

from datetime import date, datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict

from portal_berita.schemas.kategori import KategoriResponse
from portal_berita.schemas.user import PenulisSummary


class BeritaResponse(BaseModel):
    """Baris berita apa adanya, dengan kategori ter-join."""
    id_berita: int
    id_user: int
    id_kategori: int
    judul: str
    isi: str
    gambar: Optional[str] = None
    tgl_terbit: date
    is_premium: bool = False
    kategori: Optional[KategoriResponse] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class BeritaDetailResponse(BeritaResponse):
    """Berita beserta proyeksi penulis (null bila user penulis sudah tidak ada)."""
    penulis: Optional[PenulisSummary] = None
    is_locked: bool = False

    model_config = ConfigDict(json_schema_extra={
        "example": {
            "id_berita": 1,
            "id_user": 2,
            "id_kategori": 1,
            "judul": "Berita Terkini",
            "isi": "Isi berita...",
            "gambar": "berita/1735689600_foto.jpg",
            "tgl_terbit": "2025-01-01",
            "is_premium": False,
            "penulis": {
                "id_user": 2,
                "username": "johndoe",
                "name": "John Doe",
                "email": "john@example.com",
                "role": "penulis",
            },
            "kategori": {"id_kategori": 1, "kategori": "Teknologi"},
            "is_locked": False,
        }
    })


class BeritaSummary(BaseModel):
    id_berita: int
    judul: str

    model_config = ConfigDict(from_attributes=True)


class BeritaSearchResponse(BaseModel):
    success: bool = True
    data: List[BeritaDetailResponse]
    total: int
