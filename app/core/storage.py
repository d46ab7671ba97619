"""
Local filesystem storage for uploaded employee documents.

Files are written under generated names into a single upload directory and
are addressed everywhere else by that bare filename.
"""

import logging
import mimetypes
import os
import random
import time
from typing import Iterable, Optional

from fastapi import UploadFile

from app.core.config import settings
from app.core.uploads import ALLOWED_CONTENT_TYPES

logger = logging.getLogger(__name__)

CHUNK_SIZE = 64 * 1024


class UploadRejectedError(ValueError):
    """Base error for uploads refused before they are kept on disk"""


class InvalidFileTypeError(UploadRejectedError):
    pass


class FileTooLargeError(UploadRejectedError):
    pass


class LocalStorage:
    """Local filesystem storage backend"""

    def __init__(self, base_dir: str = "uploads", max_size: int = 5 * 1024 * 1024):
        self.base_dir = base_dir
        self.max_size = max_size
        os.makedirs(self.base_dir, exist_ok=True)

    def generate_filename(self, original_filename: Optional[str]) -> str:
        """Unique name of the form <epoch-millis>-<random><ext>"""
        ext = os.path.splitext(original_filename or "")[1].lower()
        return f"{int(time.time() * 1000)}-{random.randint(0, 10**9)}{ext}"

    def path_for(self, filename: str) -> str:
        """
        Resolve a stored filename to its path on disk.

        Raises:
            ValueError: If the name is empty or points outside the upload directory
        """
        if not filename or os.path.basename(filename) != filename or filename in (".", ".."):
            raise ValueError(f"Invalid filename: {filename!r}")
        return os.path.join(self.base_dir, filename)

    async def save_upload(self, upload: UploadFile) -> str:
        """
        Validate and write an uploaded file, streaming it in chunks.

        Returns:
            The generated filename

        Raises:
            InvalidFileTypeError: Content type is not in the allow-list
            FileTooLargeError: File exceeds max_size (the partial file is removed)
        """
        content_type = (upload.content_type or "").split(";", 1)[0].strip().lower()
        if content_type not in ALLOWED_CONTENT_TYPES:
            raise InvalidFileTypeError(
                f"Invalid file type for {upload.filename}: {content_type or 'unknown'}"
            )

        filename = self.generate_filename(upload.filename)
        file_path = self.path_for(filename)
        os.makedirs(self.base_dir, exist_ok=True)

        written = 0
        with open(file_path, "wb") as buffer:
            while True:
                chunk = await upload.read(CHUNK_SIZE)
                if not chunk:
                    break
                written += len(chunk)
                if written > self.max_size:
                    break
                buffer.write(chunk)

        if written > self.max_size:
            self.delete_file(filename)
            limit_mb = self.max_size / (1024 * 1024)
            raise FileTooLargeError(f"File {upload.filename} exceeds the {limit_mb:g}MB limit")

        logger.info(f"Stored upload {upload.filename} as {filename} ({written} bytes)")
        return filename

    def delete_file(self, filename: str) -> bool:
        """Best-effort delete; failures are logged and reported as False"""
        try:
            file_path = self.path_for(filename)
            if os.path.exists(file_path):
                os.remove(file_path)
                return True
            return False
        except (OSError, ValueError) as e:
            logger.warning(f"File cleanup error for {filename}: {e}")
            return False

    def delete_files(self, filenames: Iterable[str]) -> None:
        for filename in filenames:
            self.delete_file(filename)

    def file_exists(self, filename: str) -> bool:
        try:
            return os.path.isfile(self.path_for(filename))
        except ValueError:
            return False

    def content_type(self, filename: str) -> str:
        """Determine content type based on file extension"""
        guessed, _ = mimetypes.guess_type(filename)
        return guessed or "application/octet-stream"

    def is_writable(self) -> bool:
        return os.path.isdir(self.base_dir) and os.access(self.base_dir, os.W_OK)


def get_storage() -> LocalStorage:
    return LocalStorage(base_dir=settings.UPLOAD_DIR, max_size=settings.MAX_UPLOAD_SIZE)


# Singleton instance
storage = get_storage()
