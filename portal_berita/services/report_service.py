"""Reader reports on problematic berita, reviewed by admins."""

import logging
from typing import List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from portal_berita.core.exceptions import ConflictError, NotFoundError, ValidationError
from portal_berita.crud import crud_berita, crud_report, crud_user
from portal_berita.models.enums import ReportStatus
from portal_berita.models.report import Report
from portal_berita.models.user import User
from portal_berita.schemas.report import (
    ReportBeritaInfo,
    ReportCreate,
    ReportDetailResponse,
    ReportUserInfo,
)
from portal_berita.services.notification_service import notification_service

logger = logging.getLogger(__name__)

DUPLICATE_MESSAGE = "Anda sudah pernah melaporkan berita ini"


class ReportService:
    def create_report(self, db: Session, *, reporter: User, report_in: ReportCreate) -> Report:
        """
        File a report. Each user may report a given berita once.

        Raises:
            ValidationError: berita does not exist
            ConflictError: the user already reported this berita
        """
        if crud_berita.get(db, report_in.id_berita) is None:
            raise ValidationError({"id_berita": ["Berita tidak ditemukan"]})

        if crud_report.get_pair(db, id_user=reporter.id_user, id_berita=report_in.id_berita):
            raise ConflictError(DUPLICATE_MESSAGE)

        data = {
            "id_user": reporter.id_user,
            "id_berita": report_in.id_berita,
            "reason": report_in.reason.value,
            "description": report_in.description,
            "status": ReportStatus.PENDING.value,
        }
        try:
            report = crud_report.create(db, obj_in=data)
        except IntegrityError:
            logger.warning(
                f"[REPORT] Duplicate report rejected by constraint: "
                f"user={reporter.id_user} berita={report_in.id_berita}"
            )
            raise ConflictError(DUPLICATE_MESSAGE)

        logger.info(
            f"[REPORT] Created id={report.id_report} user={reporter.id_user} "
            f"berita={report.id_berita} reason={report.reason}"
        )
        return report

    def to_detail(self, db: Session, report: Report) -> ReportDetailResponse:
        user = None
        if report.user is not None:
            user = ReportUserInfo(
                id_user=report.user.id_user, name=report.user.name, email=report.user.email
            )

        berita = None
        if report.berita is not None:
            penulis = crud_user.get(db, report.berita.id_user)
            berita = ReportBeritaInfo(
                id_berita=report.berita.id_berita,
                judul=report.berita.judul,
                penulis=penulis.name if penulis else None,
            )

        return ReportDetailResponse(
            id_report=report.id_report,
            user=user,
            berita=berita,
            reason=report.reason,
            description=report.description,
            status=report.status,
            created_at=report.created_at,
        )

    def list_reports(self, db: Session, *, status: Optional[ReportStatus] = None) -> List[ReportDetailResponse]:
        reports = crud_report.get_filtered(db, status=status.value if status else None)
        return [self.to_detail(db, report) for report in reports]

    def get_report(self, db: Session, id_report: int) -> Report:
        report = crud_report.get(db, id_report)
        if report is None:
            raise NotFoundError("Laporan tidak ditemukan")
        return report

    def update_status(self, db: Session, *, actor: User, id_report: int, status: ReportStatus) -> Report:
        """
        Change a report's status and tell the reporter when it actually changed.

        Raises:
            NotFoundError: report does not exist
        """
        report = self.get_report(db, id_report)
        previous = report.status
        report = crud_report.update(db, db_obj=report, obj_in={"status": status.value})

        if previous != report.status:
            judul = report.berita.judul if report.berita else f"#{report.id_berita}"
            notification_service.notify_report_status(
                db, id_user=report.id_user, judul=judul, status=report.status
            )

        logger.info(
            f"[REPORT] Status of id={report.id_report} {previous} -> {report.status} by admin={actor.id_user}"
        )
        return report


# Singleton instance
report_service = ReportService()
