import logging

from sqlalchemy.orm import Session

from portal_berita.config import settings
from portal_berita.core.logging_config import setup_logging
from portal_berita.crud import crud_user
from portal_berita.database import Base, SessionLocal, engine
from portal_berita.models.enums import Membership, Role
from portal_berita.schemas.user import RegisterRequest
import portal_berita.models  # penting: memastikan semua model ke-import dan register ke Base.metadata  # noqa: F401

logger = logging.getLogger(__name__)


def seed_admin(db: Session) -> None:
    """Create the admin account from ADMIN_EMAIL / ADMIN_PASSWORD if none exists yet."""
    if not settings.ADMIN_EMAIL or not settings.ADMIN_PASSWORD:
        logger.info("[INIT] ADMIN_EMAIL/ADMIN_PASSWORD not set, skipping admin seed")
        return

    if crud_user.get_by_role(db, role=Role.ADMIN.value):
        logger.info("[INIT] Admin already exists, skipping seed")
        return

    # Admin tidak bisa mendaftar lewat /register, role di-override di sini
    admin_in = RegisterRequest(
        username=settings.ADMIN_USERNAME,
        name="Administrator",
        email=settings.ADMIN_EMAIL,
        password=settings.ADMIN_PASSWORD,
        password_confirmation=settings.ADMIN_PASSWORD,
        role=Role.PENULIS.value,
        membership=Membership.PREMIUM.value,
    )
    admin = crud_user.create_user(db, user_in=admin_in, role=Role.ADMIN.value)
    logger.info(f"[INIT] Admin seeded: id={admin.id_user}, email={admin.email}")


def main():
    setup_logging()
    Base.metadata.create_all(bind=engine)
    logger.info("[INIT] Tables created successfully")

    db = SessionLocal()
    try:
        seed_admin(db)
    finally:
        db.close()


if __name__ == "__main__":
    main()
