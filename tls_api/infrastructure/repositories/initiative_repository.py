"""Persistence layer for initiatives."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import func, or_
from sqlalchemy.orm import Query, Session

from tls_api.domain.entities import Initiative
from tls_api.infrastructure.models import InitiativeModel

SORTABLE_COLUMNS = {
    "title_en": InitiativeModel.title_en,
    "title_ta": InitiativeModel.title_ta,
    "bureau": InitiativeModel.bureau,
    "status": InitiativeModel.status,
    "director_name": InitiativeModel.director_name,
    "images_count": InitiativeModel.images_count,
    "created_at": InitiativeModel.created_at,
    "updated_at": InitiativeModel.updated_at,
}

_SEARCHABLE_COLUMNS = (
    InitiativeModel.title_en,
    InitiativeModel.title_ta,
    InitiativeModel.description_en,
    InitiativeModel.description_ta,
    InitiativeModel.director_name,
)


class InitiativeRepository:
    """Provide CRUD and reporting queries for initiatives.

    Methods flush but never commit; the calling use case owns the transaction.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(
        self,
        *,
        search: str | None = None,
        bureau: str | None = None,
        status: str | None = None,
        order_by: Sequence[tuple[str, bool]] = (("created_at", True),),
        skip: int = 0,
        limit: int | None = None,
    ) -> list[Initiative]:
        """Return initiatives matching the filters.

        ``order_by`` holds ``(column, descending)`` pairs whose column names must
        be keys of :data:`SORTABLE_COLUMNS`.
        """

        query = self._filtered_query(search=search, bureau=bureau, status=status)
        for column_name, descending in order_by:
            column = SORTABLE_COLUMNS[column_name]
            query = query.order_by(column.desc() if descending else column.asc())
        query = query.order_by(InitiativeModel.id.desc())
        if skip:
            query = query.offset(skip)
        if limit is not None:
            query = query.limit(limit)
        return [self._to_entity(model) for model in query.all()]

    def count(
        self,
        *,
        search: str | None = None,
        bureau: str | None = None,
        status: str | None = None,
    ) -> int:
        return self._filtered_query(search=search, bureau=bureau, status=status).count()

    def get(self, initiative_id: int) -> Initiative | None:
        model = self.session.get(InitiativeModel, initiative_id)
        return self._to_entity(model) if model else None

    def get_by_slug(self, slug: str) -> Initiative | None:
        model = (
            self.session.query(InitiativeModel)
            .filter(InitiativeModel.slug == slug)
            .first()
        )
        return self._to_entity(model) if model else None

    def create(self, initiative: Initiative) -> Initiative:
        model = InitiativeModel()
        self._apply_entity_to_model(model, initiative)
        model.images_count = initiative.images_count
        model.primary_image_url = initiative.primary_image_url
        self.session.add(model)
        self.session.flush()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, initiative: Initiative) -> Initiative:
        model = self.session.get(InitiativeModel, initiative.id)
        if model is None:
            msg = f"Initiative with id {initiative.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, initiative)
        self.session.flush()
        self.session.refresh(model)
        return self._to_entity(model)

    def update_image_summary(
        self,
        initiative_id: int,
        *,
        images_count: int,
        primary_image_url: str | None,
    ) -> Initiative:
        """Write the denormalized image fields, leaving every other column alone."""

        model = self.session.get(InitiativeModel, initiative_id)
        if model is None:
            msg = f"Initiative with id {initiative_id} not found"
            raise ValueError(msg)
        model.images_count = max(0, images_count)
        model.primary_image_url = primary_image_url
        self.session.flush()
        self.session.refresh(model)
        return self._to_entity(model)

    def delete(self, initiative_id: int) -> None:
        model = self.session.get(InitiativeModel, initiative_id)
        if model is None:
            msg = f"Initiative with id {initiative_id} not found"
            raise ValueError(msg)
        self.session.delete(model)
        self.session.flush()

    def distinct_bureaus(self) -> list[str]:
        rows = (
            self.session.query(InitiativeModel.bureau)
            .distinct()
            .order_by(InitiativeModel.bureau.asc())
            .all()
        )
        return [bureau for (bureau,) in rows]

    def count_by_status(self) -> dict[str, int]:
        rows = (
            self.session.query(InitiativeModel.status, func.count(InitiativeModel.id))
            .group_by(InitiativeModel.status)
            .all()
        )
        return {status: count for status, count in rows}

    def count_by_bureau(self) -> list[tuple[str, int]]:
        """Return ``(bureau, count)`` pairs, most populated bureau first."""

        total = func.count(InitiativeModel.id)
        rows = (
            self.session.query(InitiativeModel.bureau, total)
            .group_by(InitiativeModel.bureau)
            .order_by(total.desc(), InitiativeModel.bureau.asc())
            .all()
        )
        return [(bureau, count) for bureau, count in rows]

    def _filtered_query(
        self,
        *,
        search: str | None,
        bureau: str | None,
        status: str | None,
    ) -> Query:
        query = self.session.query(InitiativeModel)
        if search:
            pattern = f"%{search.strip()}%"
            query = query.filter(or_(*(column.ilike(pattern) for column in _SEARCHABLE_COLUMNS)))
        if bureau:
            query = query.filter(InitiativeModel.bureau == bureau)
        if status:
            query = query.filter(InitiativeModel.status == status)
        return query

    @staticmethod
    def _to_entity(model: InitiativeModel) -> Initiative:
        return Initiative(
            id=model.id,
            title_en=model.title_en,
            title_ta=model.title_ta,
            slug=model.slug,
            bureau=model.bureau,
            description_en=model.description_en,
            description_ta=model.description_ta,
            director_name=model.director_name,
            director_email=model.director_email,
            director_phone=model.director_phone,
            status=model.status,
            primary_image_url=model.primary_image_url,
            images_count=model.images_count or 0,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    @staticmethod
    def _apply_entity_to_model(model: InitiativeModel, initiative: Initiative) -> None:
        # images_count and primary_image_url are owned by update_image_summary.
        model.title_en = initiative.title_en
        model.title_ta = initiative.title_ta
        model.slug = initiative.slug
        model.bureau = initiative.bureau
        model.description_en = initiative.description_en
        model.description_ta = initiative.description_ta
        model.director_name = initiative.director_name
        model.director_email = initiative.director_email
        model.director_phone = initiative.director_phone
        model.status = initiative.status


__all__ = ["InitiativeRepository", "SORTABLE_COLUMNS"]
