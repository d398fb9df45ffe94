"""Tests for uploading, deleting and promoting initiative images."""

from __future__ import annotations

import pytest
from conftest import make_images

from tls_api.application.use_cases.initiative_images import (
    delete_initiative_image,
    recompute_counters,
    set_primary_image,
    upload_initiative_images,
)
from tls_api.application.use_cases.initiatives import get_initiative
from tls_api.domain.exceptions import (
    ImageStorageError,
    InitiativeImageNotFoundError,
    InitiativeNotFoundError,
    InvalidImageUploadError,
    NoImagesProvidedError,
)
from tls_api.infrastructure.models import InitiativeImageModel, InitiativeModel
from tls_api.infrastructure.repositories import InitiativeImageRepository


def _primaries(db_session, initiative_id: int) -> list:
    return [
        image
        for image in InitiativeImageRepository(db_session).list_by_initiative(initiative_id)
        if image.is_primary
    ]


def test_first_upload_marks_first_file_primary(db_session, storage, make_initiative) -> None:
    initiative = make_initiative()

    result = upload_initiative_images(
        db_session,
        storage,
        initiative_id=initiative.id,
        files=make_images("a.jpg", "b.jpg", "c.jpg"),
    )

    assert result.initiative.images_count == 3
    assert [image.sort_order for image in result.uploaded_images] == [1, 2, 3]
    assert [image.is_primary for image in result.uploaded_images] == [True, False, False]
    assert result.initiative.primary_image_url == result.uploaded_images[0].file_path
    for image in result.uploaded_images:
        assert storage.path_for(image.file_path).is_file()


def test_later_upload_appends_without_changing_primary(
    db_session, storage, make_initiative
) -> None:
    initiative = make_initiative()
    first = upload_initiative_images(
        db_session, storage, initiative_id=initiative.id, files=make_images("a.jpg", "b.jpg")
    )

    second = upload_initiative_images(
        db_session, storage, initiative_id=initiative.id, files=make_images("c.jpg")
    )

    assert second.initiative.images_count == 3
    assert second.uploaded_images[0].sort_order == 3
    assert second.uploaded_images[0].is_primary is False
    assert second.initiative.primary_image_url == first.uploaded_images[0].file_path
    assert len(_primaries(db_session, initiative.id)) == 1


def test_upload_assigns_primary_when_url_was_cleared(db_session, storage, make_initiative) -> None:
    initiative = make_initiative()
    first = upload_initiative_images(
        db_session, storage, initiative_id=initiative.id, files=make_images("a.jpg")
    )
    model = db_session.get(InitiativeModel, initiative.id)
    model.primary_image_url = None
    db_session.commit()

    second = upload_initiative_images(
        db_session, storage, initiative_id=initiative.id, files=make_images("b.jpg")
    )

    assert second.uploaded_images[0].is_primary is True
    assert second.initiative.primary_image_url == second.uploaded_images[0].file_path
    primaries = _primaries(db_session, initiative.id)
    assert [image.id for image in primaries] == [second.uploaded_images[0].id]
    assert primaries[0].id != first.uploaded_images[0].id


def test_upload_without_files_is_rejected(db_session, storage, make_initiative) -> None:
    initiative = make_initiative()

    with pytest.raises(NoImagesProvidedError):
        upload_initiative_images(db_session, storage, initiative_id=initiative.id, files=[])


def test_upload_to_missing_initiative_is_rejected(db_session, storage) -> None:
    with pytest.raises(InitiativeNotFoundError):
        upload_initiative_images(db_session, storage, initiative_id=999, files=make_images("a.jpg"))


def test_rejected_upload_leaves_initiative_unchanged(db_session, storage, make_initiative) -> None:
    initiative = make_initiative()
    files = make_images("a.jpg") + make_images("notes.pdf", content_type="application/pdf")

    with pytest.raises(InvalidImageUploadError):
        upload_initiative_images(db_session, storage, initiative_id=initiative.id, files=files)

    reloaded = get_initiative(db_session, initiative.id)
    assert reloaded.images_count == 0
    assert reloaded.images == []
    assert not storage.directory.exists() or not any(storage.directory.iterdir())


def test_storage_failure_removes_files_already_written(
    db_session, storage, make_initiative, monkeypatch
) -> None:
    initiative = make_initiative()
    original_save = storage.save
    calls = []

    def flaky_save(upload):
        calls.append(upload.filename)
        if len(calls) == 2:
            raise ImageStorageError("disk full")
        return original_save(upload)

    monkeypatch.setattr(storage, "save", flaky_save)

    with pytest.raises(ImageStorageError):
        upload_initiative_images(
            db_session, storage, initiative_id=initiative.id, files=make_images("a.jpg", "b.jpg")
        )

    assert list(storage.directory.iterdir()) == []
    reloaded = get_initiative(db_session, initiative.id)
    assert reloaded.images_count == 0
    assert reloaded.primary_image_url is None
    assert db_session.query(InitiativeImageModel).count() == 0


def test_deleting_primary_promotes_lowest_sort_order(db_session, storage, make_initiative) -> None:
    initiative = make_initiative()
    uploaded = upload_initiative_images(
        db_session,
        storage,
        initiative_id=initiative.id,
        files=make_images("a.jpg", "b.jpg", "c.jpg"),
    ).uploaded_images

    updated = delete_initiative_image(db_session, storage, image_id=uploaded[0].id)

    assert updated.images_count == 2
    assert updated.primary_image_url == uploaded[1].file_path
    assert [image.id for image in _primaries(db_session, initiative.id)] == [uploaded[1].id]
    assert not storage.path_for(uploaded[0].file_path).exists()


def test_deleting_non_primary_keeps_primary(db_session, storage, make_initiative) -> None:
    initiative = make_initiative()
    uploaded = upload_initiative_images(
        db_session, storage, initiative_id=initiative.id, files=make_images("a.jpg", "b.jpg")
    ).uploaded_images

    updated = delete_initiative_image(db_session, storage, image_id=uploaded[1].id)

    assert updated.images_count == 1
    assert updated.primary_image_url == uploaded[0].file_path


def test_deleting_last_image_clears_primary_url(db_session, storage, make_initiative) -> None:
    initiative = make_initiative()
    uploaded = upload_initiative_images(
        db_session, storage, initiative_id=initiative.id, files=make_images("a.jpg")
    ).uploaded_images

    updated = delete_initiative_image(db_session, storage, image_id=uploaded[0].id)

    assert updated.images_count == 0
    assert updated.primary_image_url is None
    assert updated.primary_image == "/assets/default-initiative.jpg"


def test_deleting_image_with_missing_file_still_removes_record(
    db_session, storage, make_initiative
) -> None:
    initiative = make_initiative()
    uploaded = upload_initiative_images(
        db_session, storage, initiative_id=initiative.id, files=make_images("a.jpg", "b.jpg")
    ).uploaded_images
    storage.path_for(uploaded[0].file_path).unlink()

    updated = delete_initiative_image(db_session, storage, image_id=uploaded[0].id)

    assert updated.images_count == 1
    assert InitiativeImageRepository(db_session).get(uploaded[0].id) is None


def test_deleting_unknown_image_changes_nothing(db_session, storage, make_initiative) -> None:
    initiative = make_initiative()
    upload_initiative_images(
        db_session, storage, initiative_id=initiative.id, files=make_images("a.jpg")
    )

    with pytest.raises(InitiativeImageNotFoundError):
        delete_initiative_image(db_session, storage, image_id=12345)

    reloaded = get_initiative(db_session, initiative.id)
    assert reloaded.images_count == 1
    assert len(list(storage.directory.iterdir())) == 1


def test_deleting_image_through_wrong_initiative_is_not_found(
    db_session, storage, make_initiative
) -> None:
    owner = make_initiative()
    other = make_initiative()
    uploaded = upload_initiative_images(
        db_session, storage, initiative_id=owner.id, files=make_images("a.jpg")
    ).uploaded_images

    with pytest.raises(InitiativeImageNotFoundError):
        delete_initiative_image(
            db_session, storage, image_id=uploaded[0].id, initiative_id=other.id
        )

    assert storage.path_for(uploaded[0].file_path).is_file()
    assert get_initiative(db_session, owner.id).images_count == 1


def test_set_primary_moves_flag_and_url(db_session, storage, make_initiative) -> None:
    initiative = make_initiative()
    uploaded = upload_initiative_images(
        db_session,
        storage,
        initiative_id=initiative.id,
        files=make_images("a.jpg", "b.jpg", "c.jpg"),
    ).uploaded_images

    primary = set_primary_image(db_session, image_id=uploaded[2].id)

    assert primary.is_primary is True
    assert [image.id for image in _primaries(db_session, initiative.id)] == [uploaded[2].id]
    reloaded = get_initiative(db_session, initiative.id)
    assert reloaded.primary_image_url == uploaded[2].file_path
    assert reloaded.images_count == 3


def test_set_primary_twice_is_idempotent(db_session, storage, make_initiative) -> None:
    initiative = make_initiative()
    uploaded = upload_initiative_images(
        db_session, storage, initiative_id=initiative.id, files=make_images("a.jpg", "b.jpg")
    ).uploaded_images

    set_primary_image(db_session, image_id=uploaded[1].id)
    set_primary_image(db_session, image_id=uploaded[1].id)

    assert [image.id for image in _primaries(db_session, initiative.id)] == [uploaded[1].id]
    assert get_initiative(db_session, initiative.id).primary_image_url == uploaded[1].file_path


def test_set_primary_for_another_initiative_is_not_found(
    db_session, storage, make_initiative
) -> None:
    owner = make_initiative()
    other = make_initiative()
    uploaded = upload_initiative_images(
        db_session, storage, initiative_id=owner.id, files=make_images("a.jpg", "b.jpg")
    ).uploaded_images

    with pytest.raises(InitiativeImageNotFoundError):
        set_primary_image(db_session, image_id=uploaded[1].id, initiative_id=other.id)

    assert [image.id for image in _primaries(db_session, owner.id)] == [uploaded[0].id]
    assert get_initiative(db_session, other.id).primary_image_url is None


def test_recompute_counters_repairs_drifted_summary(db_session, storage, make_initiative) -> None:
    initiative = make_initiative()
    uploaded = upload_initiative_images(
        db_session, storage, initiative_id=initiative.id, files=make_images("a.jpg", "b.jpg")
    ).uploaded_images
    db_session.query(InitiativeImageModel).update({InitiativeImageModel.is_primary: False})
    model = db_session.get(InitiativeModel, initiative.id)
    model.images_count = 7
    model.primary_image_url = "/uploads/initiatives/stale.jpg"
    db_session.commit()

    repaired = recompute_counters(db_session, initiative.id)

    assert repaired.images_count == 2
    assert repaired.primary_image_url == uploaded[0].file_path
    assert [image.id for image in _primaries(db_session, initiative.id)] == [uploaded[0].id]


def test_recompute_counters_without_images(db_session, make_initiative) -> None:
    initiative = make_initiative()
    model = db_session.get(InitiativeModel, initiative.id)
    model.images_count = 3
    model.primary_image_url = "/uploads/initiatives/gone.jpg"
    db_session.commit()

    repaired = recompute_counters(db_session, initiative.id)

    assert repaired.images_count == 0
    assert repaired.primary_image_url is None
