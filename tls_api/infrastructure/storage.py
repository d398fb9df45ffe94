"""Local filesystem storage for uploaded images."""

from __future__ import annotations

import logging
import secrets
import time
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path, PurePosixPath

from tls_api.domain.exceptions import ImageStorageError, InvalidImageUploadError

logger = logging.getLogger(__name__)

DEFAULT_FIELD_NAME = "images"


@dataclass(frozen=True)
class ImageUploadSettings:
    """Where uploaded images are written and which uploads are accepted."""

    directory: Path
    url_prefix: str
    max_file_size: int = 5 * 1024 * 1024
    max_files: int = 10
    allowed_content_type_prefix: str = "image/"


@dataclass(frozen=True)
class IncomingImage:
    """An uploaded file read into memory, not yet stored."""

    filename: str
    content_type: str | None
    data: bytes
    field_name: str = DEFAULT_FIELD_NAME

    @property
    def size(self) -> int:
        return len(self.data)


class LocalImageStorage:
    """Write, locate and remove image files below a configured directory."""

    def __init__(self, config: ImageUploadSettings) -> None:
        self.config = config

    @property
    def directory(self) -> Path:
        return self.config.directory

    def validate(self, uploads: Sequence[IncomingImage]) -> None:
        """Raise :class:`InvalidImageUploadError` unless every upload is acceptable."""

        if len(uploads) > self.config.max_files:
            raise InvalidImageUploadError(
                f"Too many files: at most {self.config.max_files} images can be uploaded at once"
            )
        for upload in uploads:
            content_type = (upload.content_type or "").lower()
            if not content_type.startswith(self.config.allowed_content_type_prefix):
                raise InvalidImageUploadError(
                    f"Only image files are allowed ({upload.filename or 'unnamed file'})"
                )
            if upload.size > self.config.max_file_size:
                limit_mb = self.config.max_file_size / (1024 * 1024)
                raise InvalidImageUploadError(
                    f"File {upload.filename or 'unnamed file'} exceeds the {limit_mb:g} MB limit"
                )

    def ensure_directory(self) -> None:
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise ImageStorageError(f"Could not prepare the image directory: {exc}") from exc

    @staticmethod
    def generate_filename(field_name: str, original_filename: str) -> str:
        """Return ``<field>-<ms timestamp>-<9 digit random><extension>``."""

        timestamp = int(time.time() * 1000)
        suffix = secrets.randbelow(10**9)
        extension = PurePosixPath(original_filename or "").suffix
        return f"{field_name}-{timestamp}-{suffix:09d}{extension}"

    def public_url(self, filename: str) -> str:
        return f"{self.config.url_prefix.rstrip('/')}/{filename}"

    def path_for(self, file_path: str) -> Path:
        """Map a stored public URL back to its location on disk.

        Only the final path component is used, so a crafted ``file_path`` can
        never point outside the storage directory.
        """

        return self.directory / PurePosixPath(file_path).name

    def save(self, upload: IncomingImage) -> str:
        """Store ``upload`` under a fresh name and return its public URL."""

        filename = self.generate_filename(upload.field_name, upload.filename)
        destination = self.directory / filename
        try:
            with destination.open("xb") as buffer:
                buffer.write(upload.data)
        except OSError as exc:
            raise ImageStorageError(f"Error saving file {upload.filename}: {exc}") from exc
        logger.debug("Stored image %s (%d bytes)", destination, upload.size)
        return self.public_url(filename)

    def delete(self, file_path: str) -> bool:
        """Remove the file behind ``file_path``; return ``False`` when nothing was removed."""

        path = self.path_for(file_path)
        try:
            path.unlink()
        except FileNotFoundError:
            logger.info("File not found or already deleted: %s", path)
            return False
        except OSError as exc:
            logger.warning("Could not delete image file %s: %s", path, exc)
            return False
        return True


__all__ = [
    "DEFAULT_FIELD_NAME",
    "ImageUploadSettings",
    "IncomingImage",
    "LocalImageStorage",
]
