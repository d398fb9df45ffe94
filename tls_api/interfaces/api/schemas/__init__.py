from .auth import RoleRead, Token, UserRead
from .common import ApiResponse, PageLink, Pagination
from .initiative import (
    BureauCountRead,
    InitiativeCreate,
    InitiativeImageRead,
    InitiativeImagesUploadRead,
    InitiativeRead,
    InitiativeStatsRead,
    InitiativeUpdate,
    StatusCountRead,
)

__all__ = [
    "ApiResponse",
    "BureauCountRead",
    "InitiativeCreate",
    "InitiativeImageRead",
    "InitiativeImagesUploadRead",
    "InitiativeRead",
    "InitiativeStatsRead",
    "InitiativeUpdate",
    "PageLink",
    "Pagination",
    "RoleRead",
    "StatusCountRead",
    "Token",
    "UserRead",
]
