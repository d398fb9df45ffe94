"""Domain entities exposed by the application."""

from .initiative import (
    DEFAULT_INITIATIVE_IMAGE,
    Initiative,
    InitiativeBureau,
    InitiativeStatus,
)
from .initiative_image import InitiativeImage
from .role import ROLE_ADMIN, ROLE_EDITOR, Role
from .user import User

__all__ = [
    "DEFAULT_INITIATIVE_IMAGE",
    "Initiative",
    "InitiativeBureau",
    "InitiativeImage",
    "InitiativeStatus",
    "ROLE_ADMIN",
    "ROLE_EDITOR",
    "Role",
    "User",
]
