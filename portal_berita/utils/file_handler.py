"""Image storage for berita uploads, with security best practices.

Files live under ``settings.UPLOAD_DIR`` and are referenced from the database
by a relative path such as ``berita/1735689600_foto.jpg``. The directory is
served publicly at ``settings.STORAGE_URL_PREFIX``.
"""
import logging
import time
from pathlib import Path
from typing import Optional, Set, Tuple

from fastapi import UploadFile

from portal_berita.config import settings
from portal_berita.core.exceptions import ServerError, ValidationError

# Setup logging
logger = logging.getLogger(__name__)

# ============================================
# FILE TYPE DEFINITIONS WITH MIME VALIDATION
# ============================================

# Magic bytes signatures for file type validation
MAGIC_BYTES = {
    # JPEG: FFD8FF
    "jpeg": [b"\xff\xd8\xff"],
    # PNG: 89504E47
    "png": [b"\x89PNG\r\n\x1a\n"],
    # GIF: GIF87a or GIF89a
    "gif": [b"GIF87a", b"GIF89a"],
}

# Extension to magic type mapping
EXTENSION_TO_TYPE = {
    ".jpg": "jpeg",
    ".jpeg": "jpeg",
    ".png": "png",
    ".gif": "gif",
}

ALLOWED_IMAGE_EXTENSIONS: Set[str] = {".jpg", ".jpeg", ".png", ".gif"}

BERITA_FOLDER = "berita"


# ============================================
# SECURITY VALIDATION FUNCTIONS
# ============================================

def validate_magic_bytes(file_content: bytes, expected_type: str) -> bool:
    """
    Validate file content by checking magic bytes (file signature).

    Args:
        file_content: First few bytes of the file
        expected_type: Expected file type (jpeg, png, gif)

    Returns:
        True if magic bytes match expected type
    """
    signatures = MAGIC_BYTES.get(expected_type, [])
    return any(file_content.startswith(signature) for signature in signatures)


def sanitize_filename(filename: str) -> str:
    """
    Sanitize filename to prevent path traversal and other attacks.

    Returns:
        Sanitized filename (only alphanumeric, dash, underscore, and dot)
    """
    if not filename:
        return "unnamed"

    # Get only the basename (remove any path components, both separators)
    basename = Path(filename.replace("\\", "/")).name

    safe_chars = set("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789-_.")
    sanitized = "".join(c if c in safe_chars else "_" for c in basename)

    # Ensure it doesn't start with a dot (hidden file)
    sanitized = sanitized.lstrip(".")

    return sanitized if sanitized else "unnamed"


def validate_path_safety(file_path: str) -> bool:
    """Validate that a stored relative path doesn't contain traversal attempts."""
    if not file_path:
        return False

    dangerous_patterns = ["..", "~", "//", "\\"]
    for pattern in dangerous_patterns:
        if pattern in file_path:
            logger.warning(f"[STORAGE] Path traversal attempt detected: {file_path}")
            return False

    if file_path.startswith("/"):
        return False

    return True


def get_file_extension(filename: str) -> str:
    """Safely get file extension in lowercase."""
    if not filename:
        return ""
    return Path(filename).suffix.lower()


# ============================================
# STORAGE
# ============================================

class ImageStorage:
    """Opaque blob store for images with a store / delete / exists contract."""

    def __init__(self, root: Optional[str] = None, max_size: Optional[int] = None):
        self._root = root
        self._max_size = max_size

    @property
    def root(self) -> Path:
        return Path(self._root or settings.UPLOAD_DIR)

    @property
    def max_size(self) -> int:
        return self._max_size or settings.MAX_UPLOAD_SIZE

    def _resolve(self, relative_path: str) -> Optional[Path]:
        """Map a stored relative path to an absolute path inside the root, or None if unsafe."""
        if not validate_path_safety(relative_path):
            return None
        root = self.root.resolve()
        resolved = (root / relative_path).resolve()
        if root != resolved and root not in resolved.parents:
            logger.warning(f"[STORAGE] Path traversal blocked: {relative_path} -> {resolved}")
            return None
        return resolved

    def validate(self, upload_file: UploadFile) -> Tuple[bytes, str]:
        """
        Validate an uploaded image.

        Returns:
            Tuple of (file_content, sanitized_filename)

        Raises:
            ValidationError: If the file is missing, too large, empty, of a
                disallowed type, or its content does not match its extension
        """
        if not upload_file or not upload_file.filename:
            raise ValidationError({"gambar": ["File tidak valid atau tidak ada"]})

        original_filename = sanitize_filename(upload_file.filename)
        file_ext = get_file_extension(original_filename)

        if file_ext not in ALLOWED_IMAGE_EXTENSIONS:
            raise ValidationError({
                "gambar": [f"Tipe file tidak diizinkan. Format yang diterima: {', '.join(sorted(ALLOWED_IMAGE_EXTENSIONS))}"]
            })

        # Never buffer more than one byte past the limit
        upload_file.file.seek(0)
        file_content = upload_file.file.read(self.max_size + 1)
        upload_file.file.seek(0)

        if len(file_content) > self.max_size:
            raise ValidationError({"gambar": [f"File terlalu besar. Maksimal: {self.max_size // 1024}KB"]})

        if len(file_content) == 0:
            raise ValidationError({"gambar": ["File kosong tidak diizinkan"]})

        expected_type = EXTENSION_TO_TYPE[file_ext]
        if not validate_magic_bytes(file_content, expected_type):
            logger.warning(
                f"[STORAGE] Magic bytes mismatch - filename: {original_filename}, "
                f"expected_type: {expected_type}"
            )
            raise ValidationError({
                "gambar": ["Konten file tidak sesuai dengan ekstensi. File mungkin rusak atau tidak valid."]
            })

        return file_content, original_filename

    def store(self, upload_file: UploadFile, folder: str = BERITA_FOLDER) -> str:
        """
        Validate and save an uploaded image.

        The stored name is ``{unix_timestamp}_{original_name}``; a numeric
        suffix is added if that name is already taken.

        Returns:
            str: Relative path (e.g., berita/1735689600_foto.jpg)
        """
        file_content, original_filename = self.validate(upload_file)

        upload_path = self.root / folder
        upload_path.mkdir(parents=True, exist_ok=True)

        stem, ext = Path(original_filename).stem, Path(original_filename).suffix
        filename = f"{int(time.time())}_{stem}{ext}"
        counter = 1
        while (upload_path / filename).exists():
            filename = f"{int(time.time())}_{stem}_{counter}{ext}"
            counter += 1

        try:
            with open(upload_path / filename, "wb") as f:
                f.write(file_content)
        except OSError as e:
            logger.error(f"[STORAGE] Failed to save file: {e}")
            raise ServerError("Gagal menyimpan file. Silakan coba lagi.")

        relative_path = f"{folder}/{filename}"
        logger.info(f"[STORAGE] File saved: {relative_path} ({len(file_content)} bytes)")
        return relative_path

    def exists(self, relative_path: Optional[str]) -> bool:
        if not relative_path:
            return False
        resolved = self._resolve(relative_path)
        return resolved is not None and resolved.is_file()

    def delete(self, relative_path: Optional[str]) -> bool:
        """
        Delete a stored file.

        Returns:
            True if the file was deleted, False if it was missing or the path unsafe
        """
        if not relative_path:
            return False
        resolved = self._resolve(relative_path)
        if resolved is None or not resolved.is_file():
            return False
        try:
            resolved.unlink()
        except OSError as e:
            logger.error(f"[STORAGE] Error deleting file {relative_path}: {e}")
            return False
        logger.info(f"[STORAGE] File deleted: {relative_path}")
        return True


# Default instance used by the services; tests may swap it through get_storage
image_storage = ImageStorage()


def get_storage() -> ImageStorage:
    """FastAPI dependency returning the image store."""
    return image_storage
