"""Use case for retrieving a single initiative."""

from sqlalchemy.orm import Session

from tls_api.domain.entities import Initiative
from tls_api.domain.exceptions import InitiativeNotFoundError
from tls_api.infrastructure.repositories import (
    InitiativeImageRepository,
    InitiativeRepository,
)


def get_initiative(
    session: Session, initiative_id: int, *, include_images: bool = True
) -> Initiative:
    """Return the initiative, with its images ordered for display, or raise."""

    initiative = InitiativeRepository(session).get(initiative_id)
    if initiative is None:
        raise InitiativeNotFoundError(initiative_id)
    if include_images:
        initiative.images = InitiativeImageRepository(session).list_by_initiative(initiative_id)
    return initiative
