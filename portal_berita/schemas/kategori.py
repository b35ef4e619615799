"""Pydantic schemas for Kategori."""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator


class KategoriBase(BaseModel):
    """Base schema for Kategori."""
    kategori: str = Field(..., min_length=1, max_length=255, description="Nama kategori")

    @field_validator("kategori")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Nama kategori tidak boleh kosong")
        return v


class KategoriCreate(KategoriBase):
    """Schema for creating a new kategori."""
    pass


class KategoriUpdate(KategoriBase):
    """Schema for renaming a kategori."""
    pass


class KategoriResponse(KategoriBase):
    """Schema for Kategori response."""
    id_kategori: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    
    model_config = ConfigDict(from_attributes=True)
