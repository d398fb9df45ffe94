"""Repository implementations for infrastructure layer."""

from .initiative_image_repository import InitiativeImageRepository
from .initiative_repository import SORTABLE_COLUMNS, InitiativeRepository
from .role_repository import RoleRepository
from .user_repository import UserRepository

__all__ = [
    "InitiativeImageRepository",
    "InitiativeRepository",
    "RoleRepository",
    "SORTABLE_COLUMNS",
    "UserRepository",
]
