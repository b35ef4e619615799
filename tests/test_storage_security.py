"""Image storage helpers, password rules, and token creation."""

import io
from datetime import timedelta

import pytest
from fastapi import UploadFile
from jose import jwt

from portal_berita.config import settings
from portal_berita.core.exceptions import AuthError, ValidationError
from portal_berita.core.security import (
    ALGORITHM,
    create_access_token,
    decode_token,
    get_password_hash,
    password_errors,
    verify_password,
)
from portal_berita.utils.file_handler import (
    ImageStorage,
    sanitize_filename,
    validate_magic_bytes,
    validate_path_safety,
)
from tests.conftest import PNG_BYTES

JPEG_BYTES = b"\xff\xd8\xff\xe0" + b"\x00" * 16


def _upload(name: str, content: bytes) -> UploadFile:
    return UploadFile(file=io.BytesIO(content), filename=name)


# ----- Filenames and paths -----
@pytest.mark.parametrize(
    "raw, expected",
    [
        ("foto saya.png", "foto_saya.png"),
        ("../../etc/passwd", "passwd"),
        ("..\\windows\\evil.jpg", "evil.jpg"),
        (".hidden.png", "hidden.png"),
        ("", "unnamed"),
    ],
)
def test_sanitize_filename(raw, expected):
    assert sanitize_filename(raw) == expected


@pytest.mark.parametrize("path", ["../secret", "berita/../../x", "/etc/passwd", "~/x", "a//b", "a\\b", ""])
def test_validate_path_safety_rejects(path):
    assert validate_path_safety(path) is False


def test_validate_path_safety_accepts_relative():
    assert validate_path_safety("berita/1700000000_foto.png") is True


def test_validate_magic_bytes():
    assert validate_magic_bytes(PNG_BYTES, "png")
    assert validate_magic_bytes(JPEG_BYTES, "jpeg")
    assert not validate_magic_bytes(PNG_BYTES, "jpeg")
    assert not validate_magic_bytes(b"GIF", "gif")


# ----- ImageStorage -----
def test_store_exists_and_delete(tmp_path):
    storage = ImageStorage(root=str(tmp_path))

    path = storage.store(_upload("foto.jpg", JPEG_BYTES))

    assert path.startswith("berita/")
    assert path.endswith("_foto.jpg")
    assert storage.exists(path)
    assert storage.delete(path) is True
    assert not storage.exists(path)
    assert storage.delete(path) is False


def test_store_never_overwrites(tmp_path):
    storage = ImageStorage(root=str(tmp_path))

    first = storage.store(_upload("sama.png", PNG_BYTES))
    second = storage.store(_upload("sama.png", PNG_BYTES))

    assert first != second
    assert storage.exists(first)
    assert storage.exists(second)


def test_store_rejects_oversized_and_empty(tmp_path):
    storage = ImageStorage(root=str(tmp_path), max_size=16)

    with pytest.raises(ValidationError):
        storage.store(_upload("besar.png", PNG_BYTES))
    with pytest.raises(ValidationError):
        storage.store(_upload("kosong.png", b""))


def test_store_reads_at_most_one_byte_past_limit(tmp_path):
    requested = []

    class RecordingStream(io.BytesIO):
        def read(self, size=-1):
            requested.append(size)
            return super().read(size)

    storage = ImageStorage(root=str(tmp_path), max_size=16)
    upload = UploadFile(file=RecordingStream(PNG_BYTES + b"\x00" * 4096), filename="besar.png")

    with pytest.raises(ValidationError) as exc_info:
        storage.store(upload)

    assert "gambar" in exc_info.value.errors
    assert requested == [17]
    assert not list(tmp_path.rglob("*.png"))


def test_store_rejects_mismatched_content(tmp_path):
    storage = ImageStorage(root=str(tmp_path))

    with pytest.raises(ValidationError) as exc_info:
        storage.store(_upload("palsu.jpg", PNG_BYTES))

    assert "gambar" in exc_info.value.errors


def test_delete_and_exists_ignore_unsafe_paths(tmp_path):
    outside = tmp_path / "outside.txt"
    outside.write_text("jangan dihapus")
    storage = ImageStorage(root=str(tmp_path / "root"))

    assert storage.exists("../outside.txt") is False
    assert storage.delete("../outside.txt") is False
    assert storage.delete(None) is False
    assert outside.exists()


# ----- Passwords -----
def test_password_rules():
    assert password_errors("P@ssW0rd3") == []
    assert len(password_errors("Ab1@")) == 1
    assert password_errors("password") != []
    assert password_errors("Password123") != []


def test_password_hash_roundtrip():
    hashed = get_password_hash("P@ssW0rd3")

    assert hashed.startswith("$pbkdf2-sha256$")
    assert verify_password("P@ssW0rd3", hashed)
    assert not verify_password("Wrong@Pass1", hashed)
    assert not verify_password("P@ssW0rd3", "not-a-hash")


# ----- Tokens -----
def test_token_without_expiry_by_default():
    payload = decode_token(create_access_token({"sub": "7"}))

    assert payload["sub"] == "7"
    assert "exp" not in payload


def test_token_with_explicit_expiry():
    token = create_access_token({"sub": "7"}, expires_delta=timedelta(minutes=5))

    assert "exp" in jwt.get_unverified_claims(token)


def test_decode_rejects_foreign_signature():
    token = jwt.encode({"sub": "7"}, settings.SECRET_KEY + "-lain", algorithm=ALGORITHM)

    with pytest.raises(AuthError):
        decode_token(token)
