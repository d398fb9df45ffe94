"""Use case for removing one image from an initiative."""

import logging

from sqlalchemy.orm import Session

from tls_api.domain.entities import Initiative
from tls_api.infrastructure.repositories import (
    InitiativeImageRepository,
    InitiativeRepository,
)
from tls_api.infrastructure.storage import LocalImageStorage

from .lookup import resolve_initiative_image

logger = logging.getLogger(__name__)


def delete_initiative_image(
    session: Session,
    storage: LocalImageStorage,
    *,
    image_id: int,
    initiative_id: int | None = None,
) -> Initiative:
    """Delete the image file and record, promoting the next image when needed.

    When the removed image was primary, the remaining image with the lowest
    ``sort_order`` takes over; when none remains ``primary_image_url`` is
    cleared. Returns the updated initiative.
    """

    initiative, image = resolve_initiative_image(
        session, image_id=image_id, initiative_id=initiative_id
    )
    initiative_repository = InitiativeRepository(session)
    image_repository = InitiativeImageRepository(session)

    storage.delete(image.file_path)

    primary_image_url = initiative.primary_image_url
    try:
        if image.is_primary:
            successor = image_repository.first_by_sort_order(initiative.id, exclude_id=image.id)
            if successor is not None:
                successor = image_repository.set_primary(initiative.id, successor.id)
                primary_image_url = successor.file_path
            else:
                primary_image_url = None

        image_repository.delete(image.id)
        updated = initiative_repository.update_image_summary(
            initiative.id,
            images_count=initiative.images_count - 1,
            primary_image_url=primary_image_url,
        )
        session.commit()
    except Exception:
        session.rollback()
        raise

    logger.info(
        "Deleted image %s of initiative %s (images_count=%d)",
        image.id,
        initiative.id,
        updated.images_count,
    )
    return updated


__all__ = ["delete_initiative_image"]
