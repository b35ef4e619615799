"""API router aggregator."""

from fastapi import APIRouter

from portal_berita.api.endpoints import (
    analytics,
    auth,
    berita,
    bookmarks,
    dislikes,
    history,
    kategori,
    likes,
    membership,
    notifications,
    reports,
    search,
    users,
)

# Routes are served at the root, without a version prefix
api_router = APIRouter()

api_router.include_router(auth.router)
api_router.include_router(users.router)
api_router.include_router(kategori.router)
api_router.include_router(berita.router)
api_router.include_router(likes.router)
api_router.include_router(dislikes.router)
api_router.include_router(history.router)
api_router.include_router(membership.router)
api_router.include_router(search.router)
api_router.include_router(bookmarks.router)
api_router.include_router(notifications.router)
api_router.include_router(reports.router)
api_router.include_router(analytics.router)

__all__ = ["api_router"]
