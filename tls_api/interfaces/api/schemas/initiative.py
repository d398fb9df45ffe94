"""Schemas for initiative and initiative image endpoints."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from tls_api.domain.entities import InitiativeBureau, InitiativeStatus


class InitiativeImageRead(BaseModel):
    id: int
    initiative_id: int
    file_path: str
    is_primary: bool
    sort_order: int
    created_at: datetime | None
    updated_at: datetime | None

    model_config = ConfigDict(from_attributes=True)


class InitiativeCreate(BaseModel):
    title_en: str = Field(..., min_length=1, max_length=200)
    title_ta: str | None = Field(default=None, max_length=200)
    bureau: InitiativeBureau
    description_en: str = Field(..., min_length=1, max_length=3000)
    description_ta: str | None = Field(default=None, max_length=3000)
    director_name: str = Field(..., min_length=1, max_length=100)
    director_email: EmailStr
    director_phone: str | None = Field(default=None, max_length=20)
    status: InitiativeStatus = Field(default=InitiativeStatus.DRAFT, validate_default=True)

    model_config = ConfigDict(use_enum_values=True, str_strip_whitespace=True)


class InitiativeUpdate(BaseModel):
    title_en: str | None = Field(default=None, min_length=1, max_length=200)
    title_ta: str | None = Field(default=None, max_length=200)
    bureau: InitiativeBureau | None = None
    description_en: str | None = Field(default=None, min_length=1, max_length=3000)
    description_ta: str | None = Field(default=None, max_length=3000)
    director_name: str | None = Field(default=None, min_length=1, max_length=100)
    director_email: EmailStr | None = None
    director_phone: str | None = Field(default=None, max_length=20)
    status: InitiativeStatus | None = None

    model_config = ConfigDict(
        use_enum_values=True, str_strip_whitespace=True, extra="forbid"
    )


class InitiativeRead(BaseModel):
    id: int
    title_en: str
    title_ta: str | None
    slug: str
    bureau: str
    description_en: str
    description_ta: str | None
    director_name: str
    director_email: str
    director_phone: str | None
    status: str
    primary_image_url: str | None
    primary_image: str
    images_count: int
    created_at: datetime | None
    updated_at: datetime | None
    images: list[InitiativeImageRead] = Field(default_factory=list)

    model_config = ConfigDict(from_attributes=True)


class InitiativeImagesUploadRead(BaseModel):
    initiative: InitiativeRead
    uploaded_images: list[InitiativeImageRead]


class StatusCountRead(BaseModel):
    status: str
    count: int


class BureauCountRead(BaseModel):
    bureau: str
    count: int


class InitiativeStatsRead(BaseModel):
    total_initiatives: int
    active_initiatives: int
    draft_initiatives: int
    archived_initiatives: int
    status_stats: list[StatusCountRead]
    bureau_stats: list[BureauCountRead]


__all__ = [
    "BureauCountRead",
    "InitiativeCreate",
    "InitiativeImageRead",
    "InitiativeImagesUploadRead",
    "InitiativeRead",
    "InitiativeStatsRead",
    "InitiativeUpdate",
    "StatusCountRead",
]
