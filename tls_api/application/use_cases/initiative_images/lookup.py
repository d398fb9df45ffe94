"""Shared lookups for the initiative image use cases."""

from sqlalchemy.orm import Session

from tls_api.domain.entities import Initiative, InitiativeImage
from tls_api.domain.exceptions import InitiativeImageNotFoundError, InitiativeNotFoundError
from tls_api.infrastructure.repositories import (
    InitiativeImageRepository,
    InitiativeRepository,
)


def get_initiative_or_raise(session: Session, initiative_id: int) -> Initiative:
    initiative = InitiativeRepository(session).get(initiative_id)
    if initiative is None:
        raise InitiativeNotFoundError(initiative_id)
    return initiative


def resolve_initiative_image(
    session: Session, *, image_id: int, initiative_id: int | None = None
) -> tuple[Initiative, InitiativeImage]:
    """Return the image and the initiative that owns it.

    With ``initiative_id`` the initiative is checked first and an image owned by
    another initiative is reported as missing. Without it the owner is read
    from the image record.
    """

    image_repository = InitiativeImageRepository(session)
    if initiative_id is not None:
        initiative = get_initiative_or_raise(session, initiative_id)
        image = image_repository.get(image_id)
        if image is None or image.initiative_id != initiative_id:
            raise InitiativeImageNotFoundError(image_id)
        return initiative, image

    image = image_repository.get(image_id)
    if image is None:
        raise InitiativeImageNotFoundError(image_id)
    return get_initiative_or_raise(session, image.initiative_id), image


__all__ = ["get_initiative_or_raise", "resolve_initiative_image"]
