"""Cloudinary photo service wrapper.

Invariants:
    - SDK failures come back as an ``error`` on the result, never as exceptions
    - Uploads request the square face-centred crop
"""

from unittest.mock import patch

import pytest
from cloudinary.exceptions import Error as CloudinaryError
from django.core.files.uploadedfile import SimpleUploadedFile

from members import photos
from members.photos import PHOTO_TRANSFORMATION, PhotoService


@pytest.fixture
def service():
    return PhotoService(cloud_name="demo", api_key="key", api_secret="secret")


@pytest.fixture
def image():
    return SimpleUploadedFile("me.jpg", b"\xff\xd8\xff fake jpeg", content_type="image/jpeg")


def test_upload_success(service, image):
    response = {"secure_url": "https://res.cloudinary.com/demo/x.jpg", "public_id": "x"}
    with patch("cloudinary.uploader.upload", return_value=response) as upload:
        result = service.add_photo(image)

    assert result.error is None
    assert result.secure_url == "https://res.cloudinary.com/demo/x.jpg"
    assert result.public_id == "x"
    upload.assert_called_once_with(image, transformation=PHOTO_TRANSFORMATION)


def test_upload_sdk_error(service, image):
    with patch("cloudinary.uploader.upload", side_effect=CloudinaryError("Invalid image file")):
        result = service.add_photo(image)

    assert result.error == "Invalid image file"
    assert result.secure_url is None


def test_upload_empty_file_is_not_sent(service):
    empty = SimpleUploadedFile("empty.jpg", b"", content_type="image/jpeg")

    with patch("cloudinary.uploader.upload") as upload:
        result = service.add_photo(empty)

    assert result.error == "File is empty"
    upload.assert_not_called()


def test_delete_success(service):
    with patch("cloudinary.uploader.destroy", return_value={"result": "ok"}) as destroy:
        result = service.delete_photo("x")

    assert result.error is None
    assert result.result == "ok"
    destroy.assert_called_once_with("x")


def test_delete_not_found(service):
    with patch("cloudinary.uploader.destroy", return_value={"result": "not found"}):
        result = service.delete_photo("missing")

    assert result.result == "not found"
    assert "missing" in result.error


def test_delete_sdk_error(service):
    with patch("cloudinary.uploader.destroy", side_effect=CloudinaryError("Must supply api_key")):
        result = service.delete_photo("x")

    assert result.error == "Must supply api_key"


def test_get_photo_service_uses_settings(settings, monkeypatch):
    settings.CLOUDINARY = {"CLOUD_NAME": "demo", "API_KEY": "key", "API_SECRET": "secret"}
    monkeypatch.setattr(photos, "_photo_service", None)

    first = photos.get_photo_service()

    assert isinstance(first, PhotoService)
    assert photos.get_photo_service() is first
