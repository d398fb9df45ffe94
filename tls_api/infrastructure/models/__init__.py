"""ORM models used by the application infrastructure."""

from .initiative import InitiativeModel
from .initiative_image import InitiativeImageModel
from .role import RoleModel
from .user import UserModel

__all__ = [
    "InitiativeModel",
    "InitiativeImageModel",
    "RoleModel",
    "UserModel",
]
