"""Routes exposing initiatives: public reads and admin-only writes."""

import logging

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from tls_api.application.use_cases.initiatives import (
    InitiativePage,
    create_initiative as create_initiative_uc,
    delete_initiative as delete_initiative_uc,
    get_initiative as get_initiative_uc,
    get_initiative_stats as get_initiative_stats_uc,
    list_bureaus as list_bureaus_uc,
    list_initiatives as list_initiatives_uc,
    update_initiative as update_initiative_uc,
)
from tls_api.domain.entities import Initiative, InitiativeBureau, InitiativeStatus, User
from tls_api.infrastructure.database import get_db
from tls_api.infrastructure.storage import LocalImageStorage
from tls_api.interfaces.api.dependencies import get_image_storage, require_admin
from tls_api.interfaces.api.schemas import (
    ApiResponse,
    BureauCountRead,
    InitiativeCreate,
    InitiativeRead,
    InitiativeStatsRead,
    InitiativeUpdate,
    PageLink,
    Pagination,
    StatusCountRead,
)

router = APIRouter(prefix="/initiatives", tags=["initiatives"])
logger = logging.getLogger(__name__)


def _to_read_model(initiative: Initiative) -> InitiativeRead:
    return InitiativeRead.model_validate(initiative)


def _pagination(result: InitiativePage) -> Pagination:
    links = {}
    if result.has_next:
        links["next"] = PageLink(page=result.page + 1, limit=result.limit)
    if result.has_prev:
        links["prev"] = PageLink(page=result.page - 1, limit=result.limit)
    return Pagination(**links)


@router.get(
    "",
    response_model=ApiResponse[list[InitiativeRead]],
    response_model_exclude_unset=True,
)
def list_initiatives(
    q: str | None = Query(None, description="Text searched in titles, descriptions and director"),
    bureau: InitiativeBureau | None = None,
    status_filter: InitiativeStatus | None = Query(None, alias="status"),
    sort: str | None = Query(
        None, description="Comma separated fields, prefix with '-' for descending order"
    ),
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    db: Session = Depends(get_db),
):
    """Return a page of initiatives matching the filters."""

    result = list_initiatives_uc(
        db,
        search=q,
        bureau=bureau.value if bureau else None,
        status=status_filter.value if status_filter else None,
        sort=sort,
        page=page,
        limit=limit,
    )
    return ApiResponse(
        success=True,
        count=len(result.items),
        total=result.total,
        pagination=_pagination(result),
        data=[_to_read_model(initiative) for initiative in result.items],
    )


@router.get("/bureaus", response_model=ApiResponse[list[str]], response_model_exclude_unset=True)
def list_bureaus(db: Session = Depends(get_db)):
    """Return the bureaus that run at least one initiative."""

    return ApiResponse(success=True, data=list_bureaus_uc(db))


@router.get(
    "/stats",
    response_model=ApiResponse[InitiativeStatsRead],
    response_model_exclude_unset=True,
)
def read_initiative_stats(
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
):
    """Return initiative totals per status and per bureau."""

    stats = get_initiative_stats_uc(db)
    return ApiResponse(
        success=True,
        data=InitiativeStatsRead(
            total_initiatives=stats.total_initiatives,
            active_initiatives=stats.active_initiatives,
            draft_initiatives=stats.draft_initiatives,
            archived_initiatives=stats.archived_initiatives,
            status_stats=[
                StatusCountRead(status=name, count=count) for name, count in stats.status_stats
            ],
            bureau_stats=[
                BureauCountRead(bureau=name, count=count) for name, count in stats.bureau_stats
            ],
        ),
    )


@router.get(
    "/{initiative_id}",
    response_model=ApiResponse[InitiativeRead],
    response_model_exclude_unset=True,
)
def read_initiative(initiative_id: int, db: Session = Depends(get_db)):
    """Return one initiative with its images."""

    return ApiResponse(success=True, data=_to_read_model(get_initiative_uc(db, initiative_id)))


@router.post(
    "",
    response_model=ApiResponse[InitiativeRead],
    response_model_exclude_unset=True,
    status_code=status.HTTP_201_CREATED,
)
def create_initiative(
    payload: InitiativeCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
):
    """Create an initiative; images are attached through the upload endpoint."""

    initiative = create_initiative_uc(db, **payload.model_dump())
    logger.info("User %s created initiative %s (%s)", current_user.id, initiative.id, initiative.slug)
    return ApiResponse(success=True, data=_to_read_model(initiative))


@router.put(
    "/{initiative_id}",
    response_model=ApiResponse[InitiativeRead],
    response_model_exclude_unset=True,
)
def update_initiative(
    initiative_id: int,
    payload: InitiativeUpdate,
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
):
    """Update the descriptive fields of an initiative."""

    update_initiative_uc(db, initiative_id, payload.model_dump(exclude_unset=True))
    return ApiResponse(success=True, data=_to_read_model(get_initiative_uc(db, initiative_id)))


@router.delete(
    "/{initiative_id}",
    response_model=ApiResponse[dict],
    response_model_exclude_unset=True,
)
def delete_initiative(
    initiative_id: int,
    db: Session = Depends(get_db),
    storage: LocalImageStorage = Depends(get_image_storage),
    current_user: User = Depends(require_admin),
):
    """Delete an initiative together with its images and their files."""

    removed_images = delete_initiative_uc(db, storage, initiative_id)
    logger.info(
        "User %s deleted initiative %s (%d image(s))", current_user.id, initiative_id, removed_images
    )
    return ApiResponse(success=True, data={}, message="Initiative deleted successfully")


__all__ = ["router"]
