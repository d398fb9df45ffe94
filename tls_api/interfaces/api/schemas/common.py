"""Response envelope shared by every endpoint."""

from typing import Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class PageLink(BaseModel):
    page: int
    limit: int


class Pagination(BaseModel):
    next: PageLink | None = None
    prev: PageLink | None = None


class ApiResponse(BaseModel, Generic[T]):
    """``{success, data?, count?, total?, pagination?, message?}``.

    Routes render it with ``response_model_exclude_unset=True`` so keys that
    were never assigned are left out of the JSON body.
    """

    success: bool = True
    data: T | None = None
    count: int | None = None
    total: int | None = None
    pagination: Pagination | None = None
    message: str | None = None


__all__ = ["ApiResponse", "PageLink", "Pagination"]
