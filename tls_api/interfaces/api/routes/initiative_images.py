"""Routes managing the image gallery of an initiative."""

from fastapi import APIRouter, Depends, File, UploadFile
from sqlalchemy.orm import Session

from tls_api.application.use_cases.initiative_images import (
    delete_initiative_image as delete_initiative_image_uc,
    recompute_counters as recompute_counters_uc,
    set_primary_image as set_primary_image_uc,
    upload_initiative_images as upload_initiative_images_uc,
)
from tls_api.domain.entities import User
from tls_api.infrastructure.database import get_db
from tls_api.infrastructure.storage import DEFAULT_FIELD_NAME, IncomingImage, LocalImageStorage
from tls_api.interfaces.api.dependencies import get_image_storage, require_admin
from tls_api.interfaces.api.schemas import (
    ApiResponse,
    InitiativeImageRead,
    InitiativeImagesUploadRead,
    InitiativeRead,
)

router = APIRouter(prefix="/initiatives", tags=["initiative images"])


def _read_upload(upload: UploadFile, max_size: int) -> IncomingImage:
    # One byte past the limit is enough to reject an oversized file.
    try:
        data = upload.file.read(max_size + 1)
    finally:
        upload.file.seek(0)
    return IncomingImage(
        filename=upload.filename or "",
        content_type=upload.content_type,
        data=data,
        field_name=DEFAULT_FIELD_NAME,
    )


@router.post(
    "/{initiative_id}/images",
    response_model=ApiResponse[InitiativeImagesUploadRead],
    response_model_exclude_unset=True,
)
def upload_initiative_images(
    initiative_id: int,
    images: list[UploadFile] | None = File(None, description="Up to 10 image files"),
    db: Session = Depends(get_db),
    storage: LocalImageStorage = Depends(get_image_storage),
    _: User = Depends(require_admin),
):
    """Store the uploaded images and attach them to the initiative."""

    files = [_read_upload(upload, storage.config.max_file_size) for upload in images or []]
    result = upload_initiative_images_uc(
        db, storage, initiative_id=initiative_id, files=files
    )
    return ApiResponse(
        success=True,
        data=InitiativeImagesUploadRead(
            initiative=InitiativeRead.model_validate(result.initiative),
            uploaded_images=[
                InitiativeImageRead.model_validate(image) for image in result.uploaded_images
            ],
        ),
        message="Initiative images uploaded successfully",
    )


@router.post(
    "/{initiative_id}/images/recompute",
    response_model=ApiResponse[InitiativeRead],
    response_model_exclude_unset=True,
)
def recompute_initiative_image_counters(
    initiative_id: int,
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
):
    """Rebuild ``images_count`` and ``primary_image_url`` from the image records."""

    initiative = recompute_counters_uc(db, initiative_id)
    return ApiResponse(
        success=True,
        data=InitiativeRead.model_validate(initiative),
        message="Image counters recomputed",
    )


def _delete_image(
    db: Session,
    storage: LocalImageStorage,
    *,
    image_id: int,
    initiative_id: int | None,
) -> ApiResponse:
    initiative = delete_initiative_image_uc(
        db, storage, image_id=image_id, initiative_id=initiative_id
    )
    return ApiResponse(
        success=True,
        data=InitiativeRead.model_validate(initiative),
        message="Image deleted successfully",
    )


def _set_primary(db: Session, *, image_id: int, initiative_id: int | None) -> ApiResponse:
    image = set_primary_image_uc(db, image_id=image_id, initiative_id=initiative_id)
    return ApiResponse(
        success=True,
        data=InitiativeImageRead.model_validate(image),
        message="Primary image updated successfully",
    )


@router.delete(
    "/images/{image_id}",
    response_model=ApiResponse[InitiativeRead],
    response_model_exclude_unset=True,
)
def delete_image(
    image_id: int,
    db: Session = Depends(get_db),
    storage: LocalImageStorage = Depends(get_image_storage),
    _: User = Depends(require_admin),
):
    """Delete an image; the owning initiative is read from the image."""

    return _delete_image(db, storage, image_id=image_id, initiative_id=None)


@router.patch(
    "/images/{image_id}/primary",
    response_model=ApiResponse[InitiativeImageRead],
    response_model_exclude_unset=True,
)
def set_primary_image(
    image_id: int,
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
):
    """Make the image the primary image of its initiative."""

    return _set_primary(db, image_id=image_id, initiative_id=None)


@router.delete(
    "/{initiative_id}/images/{image_id}",
    response_model=ApiResponse[InitiativeRead],
    response_model_exclude_unset=True,
)
def delete_initiative_image(
    initiative_id: int,
    image_id: int,
    db: Session = Depends(get_db),
    storage: LocalImageStorage = Depends(get_image_storage),
    _: User = Depends(require_admin),
):
    """Delete an image that must belong to ``initiative_id``."""

    return _delete_image(db, storage, image_id=image_id, initiative_id=initiative_id)


@router.patch(
    "/{initiative_id}/images/{image_id}/primary",
    response_model=ApiResponse[InitiativeImageRead],
    response_model_exclude_unset=True,
)
def set_initiative_primary_image(
    initiative_id: int,
    image_id: int,
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
):
    """Make an image of ``initiative_id`` its primary image."""

    return _set_primary(db, image_id=image_id, initiative_id=initiative_id)


__all__ = ["router"]
