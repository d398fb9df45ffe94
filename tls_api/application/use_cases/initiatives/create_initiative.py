"""Use case for creating initiatives."""

from sqlalchemy.orm import Session

from tls_api.domain.entities import Initiative, InitiativeStatus
from tls_api.domain.exceptions import DuplicateInitiativeError
from tls_api.infrastructure.repositories import InitiativeRepository

from .naming import slugify_title


def create_initiative(
    session: Session,
    *,
    title_en: str,
    bureau: str,
    description_en: str,
    director_name: str,
    director_email: str,
    title_ta: str | None = None,
    description_ta: str | None = None,
    director_phone: str | None = None,
    status: str = InitiativeStatus.DRAFT.value,
) -> Initiative:
    """Create an initiative without images; its slug is derived from ``title_en``."""

    repository = InitiativeRepository(session)
    slug = slugify_title(title_en)
    if repository.get_by_slug(slug) is not None:
        raise DuplicateInitiativeError(slug)

    initiative = Initiative(
        id=None,
        title_en=title_en.strip(),
        title_ta=title_ta.strip() if title_ta else title_ta,
        slug=slug,
        bureau=bureau,
        description_en=description_en,
        description_ta=description_ta,
        director_name=director_name.strip(),
        director_email=director_email.strip().lower(),
        director_phone=director_phone.strip() if director_phone else director_phone,
        status=status,
    )
    try:
        created = repository.create(initiative)
        session.commit()
    except Exception:
        session.rollback()
        raise
    return created
