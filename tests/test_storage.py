"""Tests for the local image store."""

from __future__ import annotations

import re
from pathlib import Path

import pytest

from tls_api.domain.exceptions import InvalidImageUploadError
from tls_api.infrastructure.storage import ImageUploadSettings, IncomingImage, LocalImageStorage


@pytest.fixture()
def local_storage(tmp_path: Path) -> LocalImageStorage:
    return LocalImageStorage(
        ImageUploadSettings(
            directory=tmp_path / "initiatives",
            url_prefix="/uploads/initiatives",
            max_file_size=16,
            max_files=2,
        )
    )


def test_generate_filename_keeps_extension() -> None:
    name = LocalImageStorage.generate_filename("images", "Festival Photo.JPG")

    assert re.fullmatch(r"images-\d{13}-\d{9}\.JPG", name)


def test_generate_filename_without_extension() -> None:
    assert re.fullmatch(r"images-\d+-\d{9}", LocalImageStorage.generate_filename("images", "scan"))


def test_save_writes_file_and_returns_public_url(local_storage: LocalImageStorage) -> None:
    local_storage.ensure_directory()

    url = local_storage.save(IncomingImage(filename="a.png", content_type="image/png", data=b"png"))

    assert url.startswith("/uploads/initiatives/images-")
    assert local_storage.path_for(url).read_bytes() == b"png"


@pytest.mark.parametrize(
    ("uploads", "message"),
    [
        (
            [IncomingImage(filename="a.txt", content_type="text/plain", data=b"x")],
            "Only image files are allowed (a.txt)",
        ),
        (
            [IncomingImage(filename="big.jpg", content_type="image/jpeg", data=b"x" * 17)],
            "File big.jpg exceeds",
        ),
        (
            [IncomingImage(filename=f"{i}.jpg", content_type="image/jpeg", data=b"x") for i in range(3)],
            "Too many files",
        ),
    ],
)
def test_validate_rejects_invalid_uploads(
    local_storage: LocalImageStorage, uploads: list[IncomingImage], message: str
) -> None:
    with pytest.raises(InvalidImageUploadError) as exc_info:
        local_storage.validate(uploads)

    assert exc_info.value.message.startswith(message)


def test_delete_tolerates_missing_file(local_storage: LocalImageStorage) -> None:
    local_storage.ensure_directory()

    assert local_storage.delete("/uploads/initiatives/images-1-000000001.jpg") is False


def test_path_for_stays_inside_directory(local_storage: LocalImageStorage) -> None:
    path = local_storage.path_for("/uploads/initiatives/../../etc/passwd")

    assert path == local_storage.directory / "passwd"
