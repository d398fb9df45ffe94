"""Use case for updating the descriptive fields of an initiative."""

from collections.abc import Mapping
from dataclasses import replace
from typing import Any

from sqlalchemy.orm import Session

from tls_api.domain.entities import Initiative
from tls_api.domain.exceptions import (
    BadRequestError,
    DuplicateInitiativeError,
    InitiativeNotFoundError,
)
from tls_api.infrastructure.repositories import InitiativeRepository

from .naming import slugify_title

UPDATABLE_FIELDS = frozenset(
    {
        "title_en",
        "title_ta",
        "bureau",
        "description_en",
        "description_ta",
        "director_name",
        "director_email",
        "director_phone",
        "status",
    }
)
_REQUIRED_FIELDS = frozenset(
    {"title_en", "bureau", "description_en", "director_name", "director_email", "status"}
)


def update_initiative(
    session: Session, initiative_id: int, changes: Mapping[str, Any]
) -> Initiative:
    """Apply ``changes`` to the initiative and return the stored result.

    Raises:
        InitiativeNotFoundError: If the initiative does not exist.
        BadRequestError: If a field is unknown, not writable or a required field is cleared.
    """

    unknown = set(changes) - UPDATABLE_FIELDS
    if unknown:
        raise BadRequestError(f"Fields cannot be updated: {', '.join(sorted(unknown))}")
    cleared = {name for name in _REQUIRED_FIELDS if name in changes and changes[name] is None}
    if cleared:
        raise BadRequestError(f"Fields cannot be empty: {', '.join(sorted(cleared))}")

    repository = InitiativeRepository(session)
    current = repository.get(initiative_id)
    if current is None:
        raise InitiativeNotFoundError(initiative_id)

    values = dict(changes)
    if "director_email" in values:
        values["director_email"] = values["director_email"].strip().lower()

    updated = replace(current, **values)
    if "title_en" in values and values["title_en"] != current.title_en:
        updated.slug = slugify_title(values["title_en"])
        existing = repository.get_by_slug(updated.slug)
        if existing is not None and existing.id != initiative_id:
            raise DuplicateInitiativeError(updated.slug)

    try:
        stored = repository.update(updated)
        session.commit()
    except Exception:
        session.rollback()
        raise
    return stored
