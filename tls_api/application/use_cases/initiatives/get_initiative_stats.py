"""Use case aggregating initiative counts for the admin dashboard."""

from dataclasses import dataclass

from sqlalchemy.orm import Session

from tls_api.domain.entities import InitiativeStatus
from tls_api.infrastructure.repositories import InitiativeRepository


@dataclass(frozen=True)
class InitiativeStats:
    total_initiatives: int
    active_initiatives: int
    draft_initiatives: int
    archived_initiatives: int
    status_stats: list[tuple[str, int]]
    bureau_stats: list[tuple[str, int]]


def get_initiative_stats(session: Session) -> InitiativeStats:
    """Return totals per status and per bureau (largest bureau first)."""

    repository = InitiativeRepository(session)
    by_status = repository.count_by_status()
    return InitiativeStats(
        total_initiatives=sum(by_status.values()),
        active_initiatives=by_status.get(InitiativeStatus.ACTIVE.value, 0),
        draft_initiatives=by_status.get(InitiativeStatus.DRAFT.value, 0),
        archived_initiatives=by_status.get(InitiativeStatus.ARCHIVED.value, 0),
        status_stats=sorted(by_status.items()),
        bureau_stats=repository.count_by_bureau(),
    )
