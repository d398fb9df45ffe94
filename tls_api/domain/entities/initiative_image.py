"""Domain entity describing an image attached to an initiative."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class InitiativeImage:
    """A stored image file and its position in the initiative gallery."""

    id: int | None
    initiative_id: int
    file_path: str
    is_primary: bool = False
    sort_order: int = 0
    created_at: datetime | None = None
    updated_at: datetime | None = None


__all__ = ["InitiativeImage"]
