"""Use case for listing initiatives with search, filters and pagination."""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.orm import Session

from tls_api.domain.entities import Initiative
from tls_api.domain.exceptions import InvalidQueryError
from tls_api.infrastructure.repositories import SORTABLE_COLUMNS, InitiativeRepository

DEFAULT_SORT = "-created_at"
DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100

_SORT_ALIASES = {
    "createdAt": "created_at",
    "updatedAt": "updated_at",
}


@dataclass(frozen=True)
class InitiativePage:
    """One page of initiatives plus what is needed to link the neighbours."""

    items: list[Initiative]
    total: int
    page: int
    limit: int

    @property
    def has_next(self) -> bool:
        return self.page * self.limit < self.total

    @property
    def has_prev(self) -> bool:
        return self.page > 1


def parse_sort(sort: str | None) -> list[tuple[str, bool]]:
    """Translate ``"-created_at,title_en"`` into ``[(column, descending), ...]``."""

    order_by: list[tuple[str, bool]] = []
    for raw_field in (sort or DEFAULT_SORT).split(","):
        raw_field = raw_field.strip()
        if not raw_field:
            continue
        descending = raw_field.startswith("-")
        name = raw_field.lstrip("-+")
        name = _SORT_ALIASES.get(name, name)
        if name not in SORTABLE_COLUMNS:
            raise InvalidQueryError(f"Cannot sort initiatives by '{name}'")
        order_by.append((name, descending))
    return order_by or parse_sort(DEFAULT_SORT)


def list_initiatives(
    session: Session,
    *,
    search: str | None = None,
    bureau: str | None = None,
    status: str | None = None,
    sort: str | None = None,
    page: int = 1,
    limit: int = DEFAULT_PAGE_SIZE,
) -> InitiativePage:
    """Return the requested page of initiatives matching the filters."""

    if page < 1:
        raise InvalidQueryError("Page must be greater than 0")
    if limit < 1 or limit > MAX_PAGE_SIZE:
        raise InvalidQueryError(f"Limit must be between 1 and {MAX_PAGE_SIZE}")

    order_by = parse_sort(sort)
    repository = InitiativeRepository(session)
    total = repository.count(search=search, bureau=bureau, status=status)
    items = repository.list(
        search=search,
        bureau=bureau,
        status=status,
        order_by=order_by,
        skip=(page - 1) * limit,
        limit=limit,
    )
    return InitiativePage(items=items, total=total, page=page, limit=limit)


__all__ = ["InitiativePage", "list_initiatives", "parse_sort"]
