"""Authentication related schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class Token(BaseModel):
    access_token: str
    token_type: str
    role: str


class RoleRead(BaseModel):
    id: int
    name: str
    alias: str

    model_config = ConfigDict(from_attributes=True)


class UserRead(BaseModel):
    id: int
    name: str
    email: str
    is_active: bool
    last_login: datetime | None
    role: RoleRead

    model_config = ConfigDict(from_attributes=True)


__all__ = ["RoleRead", "Token", "UserRead"]
