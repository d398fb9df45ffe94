"""Use case returning the bureaus that currently run initiatives."""

from sqlalchemy.orm import Session

from tls_api.infrastructure.repositories import InitiativeRepository


def list_bureaus(session: Session) -> list[str]:
    return InitiativeRepository(session).distinct_bureaus()
