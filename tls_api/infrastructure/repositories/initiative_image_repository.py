"""Persistence helpers for initiative images.

This repository is the only code that sets ``is_primary``. Whenever a record
becomes primary, the other images of the same initiative lose the flag in the
same flush, so an initiative never ends up with two primary images.
"""

from sqlalchemy import func
from sqlalchemy.orm import Session

from tls_api.domain.entities import InitiativeImage
from tls_api.infrastructure.models import InitiativeImageModel


class InitiativeImageRepository:
    """Provide CRUD operations for initiative images.

    Methods flush but never commit; the calling use case owns the transaction.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_by_initiative(self, initiative_id: int) -> list[InitiativeImage]:
        models = (
            self.session.query(InitiativeImageModel)
            .filter(InitiativeImageModel.initiative_id == initiative_id)
            .order_by(InitiativeImageModel.sort_order.asc(), InitiativeImageModel.id.asc())
            .all()
        )
        return [self._to_entity(model) for model in models]

    def get(self, image_id: int) -> InitiativeImage | None:
        model = self.session.get(InitiativeImageModel, image_id)
        return self._to_entity(model) if model else None

    def get_primary(self, initiative_id: int) -> InitiativeImage | None:
        model = (
            self.session.query(InitiativeImageModel)
            .filter(
                InitiativeImageModel.initiative_id == initiative_id,
                InitiativeImageModel.is_primary.is_(True),
            )
            .order_by(InitiativeImageModel.sort_order.asc(), InitiativeImageModel.id.asc())
            .first()
        )
        return self._to_entity(model) if model else None

    def first_by_sort_order(
        self, initiative_id: int, *, exclude_id: int | None = None
    ) -> InitiativeImage | None:
        """Return the image with the lowest ``sort_order``, skipping ``exclude_id``."""

        query = self.session.query(InitiativeImageModel).filter(
            InitiativeImageModel.initiative_id == initiative_id
        )
        if exclude_id is not None:
            query = query.filter(InitiativeImageModel.id != exclude_id)
        model = query.order_by(
            InitiativeImageModel.sort_order.asc(), InitiativeImageModel.id.asc()
        ).first()
        return self._to_entity(model) if model else None

    def count_by_initiative(self, initiative_id: int) -> int:
        return (
            self.session.query(func.count(InitiativeImageModel.id))
            .filter(InitiativeImageModel.initiative_id == initiative_id)
            .scalar()
            or 0
        )

    def create(self, image: InitiativeImage) -> InitiativeImage:
        model = InitiativeImageModel(
            initiative_id=image.initiative_id,
            file_path=image.file_path,
            is_primary=image.is_primary,
            sort_order=image.sort_order,
        )
        self.session.add(model)
        self.session.flush()
        if model.is_primary:
            self._clear_primary_siblings(model.initiative_id, keep_id=model.id)
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, image: InitiativeImage) -> InitiativeImage:
        model = self.session.get(InitiativeImageModel, image.id)
        if model is None:
            msg = f"Initiative image with id {image.id} not found"
            raise ValueError(msg)
        became_primary = image.is_primary and not model.is_primary
        model.file_path = image.file_path
        model.is_primary = image.is_primary
        model.sort_order = image.sort_order
        self.session.flush()
        if became_primary:
            self._clear_primary_siblings(model.initiative_id, keep_id=model.id)
        self.session.refresh(model)
        return self._to_entity(model)

    def set_primary(self, initiative_id: int, image_id: int) -> InitiativeImage:
        """Make ``image_id`` the only primary image of ``initiative_id``."""

        model = self.session.get(InitiativeImageModel, image_id)
        if model is None or model.initiative_id != initiative_id:
            msg = f"Initiative image with id {image_id} not found for initiative {initiative_id}"
            raise ValueError(msg)
        self._clear_primary_siblings(initiative_id, keep_id=image_id)
        model.is_primary = True
        self.session.flush()
        self.session.refresh(model)
        return self._to_entity(model)

    def delete(self, image_id: int) -> None:
        model = self.session.get(InitiativeImageModel, image_id)
        if model is None:
            msg = f"Initiative image with id {image_id} not found"
            raise ValueError(msg)
        self.session.delete(model)
        self.session.flush()

    def _clear_primary_siblings(self, initiative_id: int, *, keep_id: int) -> None:
        self.session.query(InitiativeImageModel).filter(
            InitiativeImageModel.initiative_id == initiative_id,
            InitiativeImageModel.id != keep_id,
            InitiativeImageModel.is_primary.is_(True),
        ).update({InitiativeImageModel.is_primary: False}, synchronize_session="fetch")

    @staticmethod
    def _to_entity(model: InitiativeImageModel) -> InitiativeImage:
        return InitiativeImage(
            id=model.id,
            initiative_id=model.initiative_id,
            file_path=model.file_path,
            is_primary=bool(model.is_primary),
            sort_order=model.sort_order,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )


__all__ = ["InitiativeImageRepository"]
