"""Report endpoints. Any user may file a report; only admins review them."""

from typing import Optional

from fastapi import APIRouter, Depends, Path, Query, status
from sqlalchemy.orm import Session

from portal_berita.api.deps import get_current_user, get_db, require_role
from portal_berita.models.enums import ReportStatus, Role
from portal_berita.models.user import User
from portal_berita.schemas.report import (
    ReportCreate,
    ReportDetailResponse,
    ReportEnvelope,
    ReportListResponse,
    ReportResponse,
    ReportStatusUpdate,
)
from portal_berita.services.report_service import report_service

router = APIRouter(
    prefix="/reports",
    tags=["Reports"],
)


@router.post(
    "",
    response_model=ReportEnvelope,
    status_code=status.HTTP_201_CREATED,
    summary="Report a berita",
    responses={
        400: {"description": "Already reported by this user"},
        401: {"description": "Not authenticated"},
        422: {"description": "Berita not found or invalid reason"},
    },
)
def create_report(
    report_in: ReportCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> ReportEnvelope:
    report = report_service.create_report(db, reporter=current_user, report_in=report_in)
    return ReportEnvelope(
        message="Laporan berhasil dikirim. Terima kasih atas partisipasi Anda.",
        data=ReportResponse.model_validate(report),
    )


@router.get(
    "",
    response_model=ReportListResponse,
    status_code=status.HTTP_200_OK,
    summary="List reports (admin)",
    responses={
        401: {"description": "Not authenticated"},
        403: {"description": "Admin only"},
    },
)
def list_reports(
    status_filter: Optional[ReportStatus] = Query(None, alias="status", description="Filter by status"),
    current_user: User = Depends(require_role(Role.ADMIN.value)),
    db: Session = Depends(get_db),
) -> ReportListResponse:
    reports = report_service.list_reports(db, status=status_filter)
    return ReportListResponse(data=reports, total=len(reports))


@router.get(
    "/{id_report}",
    response_model=ReportDetailResponse,
    status_code=status.HTTP_200_OK,
    summary="Get report (admin)",
    responses={
        401: {"description": "Not authenticated"},
        403: {"description": "Admin only"},
        404: {"description": "Report not found"},
    },
)
def get_report(
    id_report: int = Path(..., gt=0),
    current_user: User = Depends(require_role(Role.ADMIN.value)),
    db: Session = Depends(get_db),
) -> ReportDetailResponse:
    return report_service.to_detail(db, report_service.get_report(db, id_report))


@router.put(
    "/{id_report}",
    response_model=ReportEnvelope,
    status_code=status.HTTP_200_OK,
    summary="Update report status (admin)",
    responses={
        401: {"description": "Not authenticated"},
        403: {"description": "Admin only"},
        404: {"description": "Report not found"},
        422: {"description": "Invalid status"},
    },
)
def update_report_status(
    status_in: ReportStatusUpdate,
    id_report: int = Path(..., gt=0),
    current_user: User = Depends(require_role(Role.ADMIN.value)),
    db: Session = Depends(get_db),
) -> ReportEnvelope:
    """Changing the status notifies the reporter."""
    report = report_service.update_status(
        db, actor=current_user, id_report=id_report, status=status_in.status
    )
    return ReportEnvelope(
        message="Status laporan berhasil diupdate",
        data=ReportResponse.model_validate(report),
    )
