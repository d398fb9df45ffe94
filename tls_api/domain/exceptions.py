"""Typed errors raised by the use cases.

Every error carries the HTTP status it maps to so the API layer can render it
without knowing the individual failure modes.
"""

from __future__ import annotations


class DomainError(Exception):
    """Base class for expected failures of an application operation."""

    status_code: int = 400

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(DomainError):
    status_code = 404


class BadRequestError(DomainError):
    status_code = 400


class InitiativeNotFoundError(NotFoundError):
    def __init__(self, initiative_id: int) -> None:
        super().__init__(f"Initiative not found with id of {initiative_id}")
        self.initiative_id = initiative_id


class InitiativeImageNotFoundError(NotFoundError):
    def __init__(self, image_id: int) -> None:
        super().__init__(f"Image not found with id of {image_id}")
        self.image_id = image_id


class NoImagesProvidedError(BadRequestError):
    def __init__(self) -> None:
        super().__init__("Please upload at least one image file")


class InvalidImageUploadError(BadRequestError):
    """An uploaded file breaks the configured type, size or count limits."""


class InvalidQueryError(BadRequestError):
    """A list query carries an unsupported filter or sort field."""


class DuplicateInitiativeError(BadRequestError):
    def __init__(self, slug: str) -> None:
        super().__init__(f"An initiative with the slug '{slug}' already exists")
        self.slug = slug


class ImageStorageError(DomainError):
    """Writing an uploaded file to the image store failed."""

    status_code = 500


__all__ = [
    "BadRequestError",
    "DomainError",
    "DuplicateInitiativeError",
    "ImageStorageError",
    "InitiativeImageNotFoundError",
    "InitiativeNotFoundError",
    "InvalidImageUploadError",
    "InvalidQueryError",
    "NoImagesProvidedError",
    "NotFoundError",
]
