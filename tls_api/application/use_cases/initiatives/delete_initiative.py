"""Use case for deleting an initiative together with its images."""

import logging

from sqlalchemy.orm import Session

from tls_api.domain.exceptions import InitiativeNotFoundError
from tls_api.infrastructure.repositories import (
    InitiativeImageRepository,
    InitiativeRepository,
)
from tls_api.infrastructure.storage import LocalImageStorage

logger = logging.getLogger(__name__)


def delete_initiative(
    session: Session, storage: LocalImageStorage, initiative_id: int
) -> int:
    """Delete the initiative, its image records and their files.

    Returns the number of image records removed. Missing image files are
    logged by the storage and do not stop the deletion.
    """

    repository = InitiativeRepository(session)
    image_repository = InitiativeImageRepository(session)
    if repository.get(initiative_id) is None:
        raise InitiativeNotFoundError(initiative_id)

    images = image_repository.list_by_initiative(initiative_id)
    try:
        for image in images:
            image_repository.delete(image.id)
        repository.delete(initiative_id)
        session.commit()
    except Exception:
        session.rollback()
        raise

    for image in images:
        storage.delete(image.file_path)
    logger.info("Deleted initiative %s and %d image(s)", initiative_id, len(images))
    return len(images)
