"""Use case for creating users."""

from sqlalchemy.orm import Session

from tls_api.domain.entities import ROLE_ADMIN, ROLE_EDITOR, User
from tls_api.infrastructure.repositories import RoleRepository, UserRepository
from tls_api.infrastructure.security import get_password_hash

_ROLE_NAMES = {
    ROLE_ADMIN: "Administrator",
    ROLE_EDITOR: "Editor",
}


def create_user(
    session: Session,
    *,
    name: str,
    email: str,
    password: str,
    role_alias: str = ROLE_ADMIN,
) -> User:
    """Create a new user ensuring unique email addresses.

    The role is created on first use, so a fresh database can be seeded with
    this use case alone.
    """

    role_alias = role_alias.lower()
    if role_alias not in _ROLE_NAMES:
        raise ValueError(f"Unknown role '{role_alias}'")
    if len(password) < 8:
        raise ValueError("Password must be at least 8 characters long")

    repository = UserRepository(session)
    if repository.get_by_email(email):
        raise ValueError("Email address is already registered")

    role = RoleRepository(session).get_or_create(role_alias, _ROLE_NAMES[role_alias])
    user = User(
        id=None,
        role=role,
        name=name,
        email=email.strip().lower(),
        password=get_password_hash(password),
        is_active=True,
        last_login=None,
        created_at=None,
        updated_at=None,
    )
    try:
        created = repository.create(user)
        session.commit()
    except Exception:
        session.rollback()
        raise
    return created
