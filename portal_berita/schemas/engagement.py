"""Pydantic schemas for likes, dislikes, history, and bookmarks."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from portal_berita.schemas.berita import BeritaSummary


# ----- Disukai (like) -----
class DisukaiCreate(BaseModel):
    id_user: Optional[int] = Field(None, gt=0, description="Default: user dari bearer token")
    id_berita: int = Field(..., gt=0)
    suka: Optional[bool] = Field(None, description="Default true bila tidak diisi")


class DisukaiUpdate(BaseModel):
    suka: bool


class DisukaiResponse(BaseModel):
    id_disukai: int
    id_user: int
    id_berita: int
    suka: Optional[bool] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


# ----- TidakDisukai (dislike) -----
class TidakDisukaiCreate(BaseModel):
    id_user: Optional[int] = Field(None, gt=0, description="Default: user dari bearer token")
    id_berita: int = Field(..., gt=0)
    tidak_suka: Optional[bool] = Field(None, description="Default true bila tidak diisi")


class TidakDisukaiUpdate(BaseModel):
    tidak_suka: bool


class TidakDisukaiResponse(BaseModel):
    id_tidaksuka: int
    id_user: int
    id_berita: int
    tidak_suka: Optional[bool] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


# ----- History -----
class UserSummary(BaseModel):
    id_user: int
    name: str
    email: str

    model_config = ConfigDict(from_attributes=True)


class HistoryCreate(BaseModel):
    id_user: Optional[int] = Field(None, gt=0, description="Default: user dari bearer token")
    id_berita: int = Field(..., gt=0)


class HistoryResponse(BaseModel):
    id_history: int
    id_user: int
    id_berita: int
    created_at: Optional[datetime] = None
    user: Optional[UserSummary] = None
    berita: Optional[BeritaSummary] = None

    model_config = ConfigDict(from_attributes=True)


# ----- Bookmark -----
class BookmarkCreate(BaseModel):
    id_berita: int = Field(..., gt=0)


class BookmarkResponse(BaseModel):
    id_bookmark: int
    id_user: int
    id_berita: int
    created_at: Optional[datetime] = None
    berita: Optional[BeritaSummary] = None

    model_config = ConfigDict(from_attributes=True)
