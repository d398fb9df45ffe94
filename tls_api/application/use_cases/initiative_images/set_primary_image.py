"""Use case for choosing the primary image of an initiative."""

import logging

from sqlalchemy.orm import Session

from tls_api.domain.entities import InitiativeImage
from tls_api.infrastructure.repositories import (
    InitiativeImageRepository,
    InitiativeRepository,
)

from .lookup import resolve_initiative_image

logger = logging.getLogger(__name__)


def set_primary_image(
    session: Session, *, image_id: int, initiative_id: int | None = None
) -> InitiativeImage:
    """Make ``image_id`` the only primary image of its initiative.

    Calling it again for the current primary image changes nothing.
    """

    initiative, image = resolve_initiative_image(
        session, image_id=image_id, initiative_id=initiative_id
    )
    try:
        primary = InitiativeImageRepository(session).set_primary(initiative.id, image.id)
        InitiativeRepository(session).update_image_summary(
            initiative.id,
            images_count=initiative.images_count,
            primary_image_url=primary.file_path,
        )
        session.commit()
    except Exception:
        session.rollback()
        raise

    logger.info("Image %s is now primary for initiative %s", primary.id, initiative.id)
    return primary


__all__ = ["set_primary_image"]
