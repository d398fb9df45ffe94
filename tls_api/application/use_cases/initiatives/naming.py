"""Helpers for deriving initiative slugs from their English titles."""

from __future__ import annotations

import re

from tls_api.domain.exceptions import BadRequestError

MAX_SLUG_LENGTH = 100

_DISALLOWED_CHARACTERS = re.compile(r"[^a-z0-9\s-]")
_WHITESPACE = re.compile(r"\s+")
_REPEATED_DASHES = re.compile(r"-+")


def slugify_title(title: str) -> str:
    """Return the URL slug for ``title``.

    Lowercases the title, drops everything but ASCII letters, digits, spaces and
    dashes, turns whitespace runs into single dashes and trims the result to
    :data:`MAX_SLUG_LENGTH` characters.
    """

    slug = _DISALLOWED_CHARACTERS.sub("", title.lower())
    slug = _WHITESPACE.sub("-", slug.strip())
    slug = _REPEATED_DASHES.sub("-", slug).strip("-")
    slug = slug[:MAX_SLUG_LENGTH].rstrip("-")
    if not slug:
        raise BadRequestError("English title must contain at least one letter or digit")
    return slug


__all__ = ["MAX_SLUG_LENGTH", "slugify_title"]
