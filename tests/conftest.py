"""
Shared fixtures for the Portal Berita test suite.

Settings are read at import time, so the environment is prepared before any
portal_berita module is imported.
"""

import os
import tempfile

os.environ.setdefault("SECRET_KEY", "test-secret-key-for-portal-berita")
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["UPLOAD_DIR"] = tempfile.mkdtemp(prefix="portal_berita_storage_")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from portal_berita.api.deps import get_db  # noqa: E402
from portal_berita.crud import crud_user  # noqa: E402
from portal_berita.database import Base  # noqa: E402
from portal_berita.main import app  # noqa: E402
from portal_berita.schemas.user import RegisterRequest  # noqa: E402
from portal_berita.utils.file_handler import ImageStorage, get_storage  # noqa: E402

DEFAULT_PASSWORD = "P@ssW0rd3"
PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 32

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture()
def db():
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def storage(tmp_path):
    return ImageStorage(root=str(tmp_path / "storage"))


@pytest.fixture()
def client(db, storage):
    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_storage] = lambda: storage
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


# ----- Helpers -----
def auth_headers(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


def register_user(
    client,
    username: str,
    email: str,
    role: str = "pembaca",
    membership: str = "free",
    password: str = DEFAULT_PASSWORD,
    name: str = None,
):
    return client.post(
        "/register",
        json={
            "username": username,
            "name": name or username.title(),
            "email": email,
            "password": password,
            "password_confirmation": password,
            "role": role,
            "membership": membership,
        },
    )


def login_user(client, email: str, role: str, password: str = DEFAULT_PASSWORD):
    return client.post("/login", json={"email": email, "password": password, "role": role})


def create_account(client, username: str, role: str = "pembaca", membership: str = "free") -> dict:
    """Register and log in; returns {"id", "email", "headers"}."""
    email = f"{username.lower()}@mail.com"
    response = register_user(client, username, email, role=role, membership=membership)
    assert response.status_code == 201, response.text
    token = login_user(client, email, role).json()["access_token"]
    return {
        "id": response.json()["data"]["id_user"],
        "email": email,
        "headers": auth_headers(token),
    }


def create_kategori(client, headers: dict, name: str = "Teknologi") -> int:
    response = client.post("/kategori", json={"kategori": name}, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()["id_kategori"]


def create_berita(client, headers: dict, id_kategori: int, files=None, **fields) -> dict:
    data = {
        "id_kategori": str(id_kategori),
        "judul": "Berita Terkini",
        "isi": "Isi berita hari ini.",
        "tgl_terbit": "2025-01-01",
    }
    data.update({key: str(value) for key, value in fields.items()})
    response = client.post("/berita", data=data, files=files, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


# ----- Account fixtures -----
@pytest.fixture()
def admin(client, db):
    admin_in = RegisterRequest(
        username="admin",
        name="Administrator",
        email="admin@mail.com",
        password=DEFAULT_PASSWORD,
        password_confirmation=DEFAULT_PASSWORD,
        role="penulis",
        membership="free",
    )
    user = crud_user.create_user(db, user_in=admin_in, role="admin")
    token = login_user(client, "admin@mail.com", "admin").json()["access_token"]
    return {"id": user.id_user, "email": user.email, "headers": auth_headers(token)}


@pytest.fixture()
def penulis(client):
    return create_account(client, "penulis", role="penulis")


@pytest.fixture()
def pembaca(client):
    return create_account(client, "pembaca", role="pembaca")


@pytest.fixture()
def kategori_id(client, penulis):
    return create_kategori(client, penulis["headers"])


@pytest.fixture()
def berita(client, penulis, kategori_id):
    return create_berita(client, penulis["headers"], kategori_id)
