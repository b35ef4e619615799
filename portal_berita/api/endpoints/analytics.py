"""Analytics endpoints for dashboard data."""

from fastapi import APIRouter, Depends
from sqlalchemy import func, select
from sqlalchemy.orm import Session

from portal_berita.api.deps import get_db, require_role
from portal_berita.models.berita import Berita
from portal_berita.models.disukai import Disukai
from portal_berita.models.enums import Membership, ReportStatus, Role
from portal_berita.models.history import History
from portal_berita.models.kategori import Kategori
from portal_berita.models.report import Report
from portal_berita.models.tidak_disukai import TidakDisukai
from portal_berita.models.user import User
from portal_berita.schemas.analytics import (
    BeritaStats,
    ContentAnalyticsResponse,
    DashboardResponse,
    UserAnalyticsResponse,
)

router = APIRouter(prefix="/analytics", tags=["Analytics"])


@router.get(
    "/dashboard",
    response_model=DashboardResponse,
    summary="Get Dashboard Totals",
    description="Platform-wide totals. Only accessible by admin."
)
def get_dashboard(
    db: Session = Depends(get_db),
    current_user: User = Depends(require_role(Role.ADMIN.value))
) -> DashboardResponse:
    total_users = db.scalar(select(func.count(User.id_user))) or 0
    total_berita = db.scalar(select(func.count(Berita.id_berita))) or 0
    total_kategori = db.scalar(select(func.count(Kategori.id_kategori))) or 0

    # Only positive reactions count
    total_likes = db.scalar(
        select(func.count(Disukai.id_disukai)).where(Disukai.suka == True)  # noqa: E712
    ) or 0
    total_dislikes = db.scalar(
        select(func.count(TidakDisukai.id_tidaksuka)).where(TidakDisukai.tidak_suka == True)  # noqa: E712
    ) or 0

    total_views = db.scalar(select(func.count(History.id_history))) or 0
    total_reports_pending = db.scalar(
        select(func.count(Report.id_report)).where(Report.status == ReportStatus.PENDING.value)
    ) or 0

    return DashboardResponse(
        total_users=total_users,
        total_berita=total_berita,
        total_kategori=total_kategori,
        total_likes=total_likes,
        total_dislikes=total_dislikes,
        total_views=total_views,
        total_reports_pending=total_reports_pending,
    )


@router.get(
    "/users",
    response_model=UserAnalyticsResponse,
    summary="Get User Breakdown",
    description="User counts per role and per membership. Only accessible by admin."
)
def get_user_analytics(
    db: Session = Depends(get_db),
    current_user: User = Depends(require_role(Role.ADMIN.value))
) -> UserAnalyticsResponse:
    # Every enum value is present, zero when unused
    by_role = {role.value: 0 for role in Role}
    for role, count in db.execute(select(User.role, func.count(User.id_user)).group_by(User.role)):
        by_role[role] = count

    by_membership = {membership.value: 0 for membership in Membership}
    for membership, count in db.execute(
        select(User.membership, func.count(User.id_user)).group_by(User.membership)
    ):
        by_membership[membership] = count

    return UserAnalyticsResponse(
        total_users=sum(by_role.values()),
        by_role=by_role,
        by_membership=by_membership,
    )


@router.get(
    "/content",
    response_model=ContentAnalyticsResponse,
    summary="Get Content Engagement",
    description="Per-berita likes, dislikes and views. Admin sees everything; penulis sees only their own berita."
)
def get_content_analytics(
    db: Session = Depends(get_db),
    current_user: User = Depends(require_role(Role.ADMIN.value, Role.PENULIS.value))
) -> ContentAnalyticsResponse:
    likes_sq = (
        select(Disukai.id_berita, func.count(Disukai.id_disukai).label("likes"))
        .where(Disukai.suka == True)  # noqa: E712
        .group_by(Disukai.id_berita)
        .subquery()
    )
    dislikes_sq = (
        select(TidakDisukai.id_berita, func.count(TidakDisukai.id_tidaksuka).label("dislikes"))
        .where(TidakDisukai.tidak_suka == True)  # noqa: E712
        .group_by(TidakDisukai.id_berita)
        .subquery()
    )
    views_sq = (
        select(History.id_berita, func.count(History.id_history).label("views"))
        .group_by(History.id_berita)
        .subquery()
    )

    stmt = (
        select(
            Berita.id_berita,
            Berita.judul,
            func.coalesce(likes_sq.c.likes, 0),
            func.coalesce(dislikes_sq.c.dislikes, 0),
            func.coalesce(views_sq.c.views, 0),
        )
        .outerjoin(likes_sq, likes_sq.c.id_berita == Berita.id_berita)
        .outerjoin(dislikes_sq, dislikes_sq.c.id_berita == Berita.id_berita)
        .outerjoin(views_sq, views_sq.c.id_berita == Berita.id_berita)
        .order_by(Berita.id_berita)
    )

    per_kategori_stmt = (
        select(Kategori.kategori, func.count(Berita.id_berita))
        .join(Berita, Berita.id_kategori == Kategori.id_kategori)
        .group_by(Kategori.kategori)
        .order_by(Kategori.kategori)
    )

    # Penulis only see their own berita
    if not current_user.is_admin:
        stmt = stmt.where(Berita.id_user == current_user.id_user)
        per_kategori_stmt = per_kategori_stmt.where(Berita.id_user == current_user.id_user)

    berita = [
        BeritaStats(id_berita=id_berita, judul=judul, likes=likes, dislikes=dislikes, views=views)
        for id_berita, judul, likes, dislikes, views in db.execute(stmt)
    ]
    per_kategori = {name: count for name, count in db.execute(per_kategori_stmt)}

    return ContentAnalyticsResponse(
        total_berita=len(berita),
        total_likes=sum(item.likes for item in berita),
        total_dislikes=sum(item.dislikes for item in berita),
        total_views=sum(item.views for item in berita),
        berita=berita,
        per_kategori=per_kategori,
    )
