"""Use cases for the images of an initiative."""

from .delete_image import delete_initiative_image
from .recompute_counters import recompute_counters
from .set_primary_image import set_primary_image
from .upload_images import ImageUploadResult, upload_initiative_images

__all__ = [
    "ImageUploadResult",
    "delete_initiative_image",
    "recompute_counters",
    "set_primary_image",
    "upload_initiative_images",
]
