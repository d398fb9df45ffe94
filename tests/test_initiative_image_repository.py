"""Tests for the single-primary guarantee kept by the image repository."""

from __future__ import annotations

import pytest

from tls_api.domain.entities import InitiativeImage
from tls_api.infrastructure.repositories import InitiativeImageRepository


def _add(repository: InitiativeImageRepository, initiative_id: int, order: int, *, primary=False):
    return repository.create(
        InitiativeImage(
            id=None,
            initiative_id=initiative_id,
            file_path=f"/uploads/initiatives/images-{order}.jpg",
            is_primary=primary,
            sort_order=order,
        )
    )


def _primary_ids(repository: InitiativeImageRepository, initiative_id: int) -> list[int]:
    return [image.id for image in repository.list_by_initiative(initiative_id) if image.is_primary]


def test_creating_primary_clears_previous_primary(db_session, make_initiative) -> None:
    initiative = make_initiative()
    repository = InitiativeImageRepository(db_session)

    first = _add(repository, initiative.id, 1, primary=True)
    second = _add(repository, initiative.id, 2, primary=True)
    db_session.commit()

    assert _primary_ids(repository, initiative.id) == [second.id]
    assert repository.get(first.id).is_primary is False


def test_updating_image_to_primary_clears_siblings(db_session, make_initiative) -> None:
    initiative = make_initiative()
    repository = InitiativeImageRepository(db_session)
    first = _add(repository, initiative.id, 1, primary=True)
    second = _add(repository, initiative.id, 2)

    second.is_primary = True
    repository.update(second)
    db_session.commit()

    assert _primary_ids(repository, initiative.id) == [second.id]
    assert repository.get(first.id).is_primary is False


def test_primary_flags_are_scoped_per_initiative(db_session, make_initiative) -> None:
    first_initiative = make_initiative()
    second_initiative = make_initiative()
    repository = InitiativeImageRepository(db_session)

    first = _add(repository, first_initiative.id, 1, primary=True)
    second = _add(repository, second_initiative.id, 1, primary=True)
    db_session.commit()

    assert _primary_ids(repository, first_initiative.id) == [first.id]
    assert _primary_ids(repository, second_initiative.id) == [second.id]


def test_set_primary_rejects_image_of_other_initiative(db_session, make_initiative) -> None:
    owner = make_initiative()
    other = make_initiative()
    repository = InitiativeImageRepository(db_session)
    image = _add(repository, owner.id, 1)

    with pytest.raises(ValueError):
        repository.set_primary(other.id, image.id)


def test_first_by_sort_order_skips_excluded_image(db_session, make_initiative) -> None:
    initiative = make_initiative()
    repository = InitiativeImageRepository(db_session)
    third = _add(repository, initiative.id, 3)
    first = _add(repository, initiative.id, 1, primary=True)
    _add(repository, initiative.id, 2)

    assert repository.first_by_sort_order(initiative.id).id == first.id
    assert repository.first_by_sort_order(initiative.id, exclude_id=first.id).sort_order == 2
    assert repository.count_by_initiative(initiative.id) == 3
    assert [image.sort_order for image in repository.list_by_initiative(initiative.id)] == [1, 2, 3]
    assert repository.get(third.id).sort_order == 3
