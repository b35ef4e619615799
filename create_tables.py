from portal_berita.database import Base, engine
from portal_berita.models import (  # noqa: F401
    user,
    kategori,
    berita,
    disukai,
    tidak_disukai,
    history,
    bookmark,
    notification,
    report,
)

print("Creating database tables...")
Base.metadata.create_all(bind=engine)
print("✅ All tables created successfully!")
