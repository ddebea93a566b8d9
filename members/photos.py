import logging
from dataclasses import dataclass
from typing import Optional

import cloudinary
import cloudinary.uploader
from cloudinary.exceptions import Error as CloudinaryError
from django.conf import settings

logger = logging.getLogger(__name__)

# Square crop centred on the detected face
PHOTO_TRANSFORMATION = [
    {"height": 500, "width": 500, "crop": "fill", "gravity": "face"},
]


@dataclass
class UploadResult:
    secure_url: Optional[str] = None
    public_id: Optional[str] = None
    error: Optional[str] = None


@dataclass
class DeletionResult:
    result: Optional[str] = None
    error: Optional[str] = None


class PhotoService:
    """Thin wrapper around the Cloudinary SDK; failures come back on the result."""

    def __init__(self, cloud_name: str, api_key: str, api_secret: str):
        cloudinary.config(
            cloud_name=cloud_name,
            api_key=api_key,
            api_secret=api_secret,
            secure=True,
        )

    def add_photo(self, file_obj) -> UploadResult:
        if not file_obj or not getattr(file_obj, "size", 0):
            return UploadResult(error="File is empty")

        try:
            response = cloudinary.uploader.upload(
                file_obj,
                transformation=PHOTO_TRANSFORMATION,
            )
        except CloudinaryError as e:
            logger.error(f"Photo upload failed for {getattr(file_obj, 'name', '<file>')}: {e}")
            return UploadResult(error=str(e))

        logger.info(f"Uploaded photo {response.get('public_id')}")
        return UploadResult(
            secure_url=response.get("secure_url"),
            public_id=response.get("public_id"),
        )

    def delete_photo(self, public_id: str) -> DeletionResult:
        try:
            response = cloudinary.uploader.destroy(public_id)
        except CloudinaryError as e:
            logger.error(f"Photo deletion failed for {public_id}: {e}")
            return DeletionResult(error=str(e))

        result = response.get("result")
        if result != "ok":
            return DeletionResult(result=result, error=f"Photo {public_id} could not be deleted: {result}")

        logger.info(f"Deleted photo {public_id}")
        return DeletionResult(result=result)


_photo_service = None


def get_photo_service() -> PhotoService:
    global _photo_service
    if _photo_service is None:
        config = settings.CLOUDINARY
        _photo_service = PhotoService(
            cloud_name=config["CLOUD_NAME"],
            api_key=config["API_KEY"],
            api_secret=config["API_SECRET"],
        )
    return _photo_service
