"""Domain entity describing an initiative."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from .initiative_image import InitiativeImage

DEFAULT_INITIATIVE_IMAGE = "/assets/default-initiative.jpg"


class InitiativeBureau(str, Enum):
    MEDIA_PUBLIC_RELATIONS = "media-public-relations"
    SPORTS_LEADERSHIP = "sports-leadership"
    EDUCATION_INTELLECTUAL = "education-intellectual"
    ARTS_CULTURE = "arts-culture"
    SOCIAL_WELFARE_VOLUNTARY = "social-welfare-voluntary"
    LANGUAGE_LITERATURE = "language-literature"


class InitiativeStatus(str, Enum):
    DRAFT = "draft"
    ACTIVE = "active"
    ARCHIVED = "archived"


@dataclass
class Initiative:
    """An initiative with its bilingual texts and denormalized image summary.

    ``images_count`` and ``primary_image_url`` are caches of the image records;
    ``images`` is only filled when the caller asked for them.
    """

    id: int | None
    title_en: str
    title_ta: str | None
    slug: str
    bureau: str
    description_en: str
    description_ta: str | None
    director_name: str
    director_email: str
    director_phone: str | None
    status: str = InitiativeStatus.DRAFT.value
    primary_image_url: str | None = None
    images_count: int = 0
    created_at: datetime | None = None
    updated_at: datetime | None = None
    images: list[InitiativeImage] = field(default_factory=list)

    @property
    def primary_image(self) -> str:
        """Return the primary image URL or the site-wide placeholder."""

        return self.primary_image_url or DEFAULT_INITIATIVE_IMAGE

    def has_primary_image(self) -> bool:
        return self.images_count > 0 and self.primary_image_url is not None


__all__ = [
    "DEFAULT_INITIATIVE_IMAGE",
    "Initiative",
    "InitiativeBureau",
    "InitiativeStatus",
]
