"""Use case for attaching uploaded images to an initiative."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from sqlalchemy.orm import Session

from tls_api.domain.entities import Initiative, InitiativeImage
from tls_api.domain.exceptions import NoImagesProvidedError
from tls_api.infrastructure.repositories import (
    InitiativeImageRepository,
    InitiativeRepository,
)
from tls_api.infrastructure.storage import IncomingImage, LocalImageStorage

from .lookup import get_initiative_or_raise

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ImageUploadResult:
    initiative: Initiative
    uploaded_images: list[InitiativeImage]


def upload_initiative_images(
    session: Session,
    storage: LocalImageStorage,
    *,
    initiative_id: int,
    files: Sequence[IncomingImage],
) -> ImageUploadResult:
    """Store ``files`` and register them as images of the initiative.

    Images are appended after the existing ones (``sort_order`` continues from
    ``images_count``). When the initiative has no primary image yet, the first
    uploaded file becomes primary and its path is copied to
    ``primary_image_url``.

    Raises:
        InitiativeNotFoundError: If the initiative does not exist.
        NoImagesProvidedError: If ``files`` is empty.
        InvalidImageUploadError: If a file breaks the storage limits.
        ImageStorageError: If a file cannot be written. Files already written
            by this call are removed and no record is kept.
    """

    initiative = get_initiative_or_raise(session, initiative_id)
    if not files:
        raise NoImagesProvidedError()
    storage.validate(files)
    storage.ensure_directory()

    initiative_repository = InitiativeRepository(session)
    image_repository = InitiativeImageRepository(session)
    assign_primary = not initiative.has_primary_image()

    stored_paths: list[str] = []
    uploaded: list[InitiativeImage] = []
    try:
        for index, upload in enumerate(files):
            file_path = storage.save(upload)
            stored_paths.append(file_path)
            image = InitiativeImage(
                id=None,
                initiative_id=initiative_id,
                file_path=file_path,
                is_primary=index == 0 and assign_primary,
                sort_order=initiative.images_count + index + 1,
            )
            uploaded.append(image_repository.create(image))

        primary_image_url = initiative.primary_image_url
        if assign_primary:
            primary_image_url = uploaded[0].file_path
        updated = initiative_repository.update_image_summary(
            initiative_id,
            images_count=initiative.images_count + len(uploaded),
            primary_image_url=primary_image_url,
        )
        session.commit()
    except Exception:
        session.rollback()
        for file_path in stored_paths:
            storage.delete(file_path)
        raise

    logger.info(
        "Uploaded %d image(s) to initiative %s (images_count=%d)",
        len(uploaded),
        initiative_id,
        updated.images_count,
    )
    return ImageUploadResult(initiative=updated, uploaded_images=uploaded)


__all__ = ["ImageUploadResult", "upload_initiative_images"]
