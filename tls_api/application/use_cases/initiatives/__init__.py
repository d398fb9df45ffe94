"""Use cases for managing initiatives."""

from .create_initiative import create_initiative
from .delete_initiative import delete_initiative
from .get_initiative import get_initiative
from .get_initiative_stats import InitiativeStats, get_initiative_stats
from .list_bureaus import list_bureaus
from .list_initiatives import InitiativePage, list_initiatives, parse_sort
from .naming import slugify_title
from .update_initiative import UPDATABLE_FIELDS, update_initiative

__all__ = [
    "InitiativePage",
    "InitiativeStats",
    "UPDATABLE_FIELDS",
    "create_initiative",
    "delete_initiative",
    "get_initiative",
    "get_initiative_stats",
    "list_bureaus",
    "list_initiatives",
    "parse_sort",
    "slugify_title",
    "update_initiative",
]
