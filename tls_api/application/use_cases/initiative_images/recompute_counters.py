"""Use case rebuilding the denormalized image fields of an initiative."""

import logging

from sqlalchemy.orm import Session

from tls_api.domain.entities import Initiative
from tls_api.infrastructure.repositories import (
    InitiativeImageRepository,
    InitiativeRepository,
)

from .lookup import get_initiative_or_raise

logger = logging.getLogger(__name__)


def recompute_counters(session: Session, initiative_id: int) -> Initiative:
    """Recount the images of an initiative and repair its primary image.

    ``images_count`` becomes the number of image records. If images exist but
    none is primary, the one with the lowest ``sort_order`` is promoted; extra
    primaries left by interleaved requests are cleared. ``primary_image_url``
    then mirrors the primary record, or is ``None`` without images.
    """

    initiative = get_initiative_or_raise(session, initiative_id)
    image_repository = InitiativeImageRepository(session)

    try:
        images_count = image_repository.count_by_initiative(initiative_id)
        primary_image_url = None
        if images_count:
            target = image_repository.get_primary(initiative_id) or (
                image_repository.first_by_sort_order(initiative_id)
            )
            primary_image_url = image_repository.set_primary(initiative_id, target.id).file_path
        updated = InitiativeRepository(session).update_image_summary(
            initiative_id,
            images_count=images_count,
            primary_image_url=primary_image_url,
        )
        session.commit()
    except Exception:
        session.rollback()
        raise

    if (initiative.images_count, initiative.primary_image_url) != (
        updated.images_count,
        updated.primary_image_url,
    ):
        logger.warning(
            "Repaired image summary of initiative %s: count %d -> %d, primary %r -> %r",
            initiative_id,
            initiative.images_count,
            updated.images_count,
            initiative.primary_image_url,
            updated.primary_image_url,
        )
    return updated


__all__ = ["recompute_counters"]
