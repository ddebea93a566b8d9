"""Root conftest: shared users, members and API clients."""

from datetime import date
from unittest.mock import Mock, patch

import pytest
from dateutil.relativedelta import relativedelta
from django.contrib.auth import get_user_model
from rest_framework.test import APIClient

from members.models import MemberProfile, Photo
from members.photos import DeletionResult, UploadResult

User = get_user_model()


@pytest.fixture(autouse=True)
def _plain_http(settings):
    """Test requests are plain http; keep SecurityMiddleware from redirecting them."""
    settings.SECURE_SSL_REDIRECT = False


@pytest.fixture
def make_member(db):
    """Create a user with a member profile. ``age`` sets date_of_birth relative to today."""

    def _make(username, gender="male", age=30, **fields):
        user = User.objects.create_user(username=username, password="Pa$$w0rd")
        fields.setdefault("known_as", username.title())
        fields.setdefault("date_of_birth", date.today() - relativedelta(years=age))
        return MemberProfile.objects.create(user=user, gender=gender, **fields)

    return _make


@pytest.fixture
def add_photo(db):
    def _add(member, url="https://res.cloudinary.com/demo/image/upload/p.jpg", public_id=None, is_main=False):
        return Photo.objects.create(member=member, url=url, public_id=public_id, is_main=is_main)

    return _add


@pytest.fixture
def caller(make_member):
    return make_member("bob", gender="male")


@pytest.fixture
def api_client(caller):
    client = APIClient()
    client.force_authenticate(user=caller.user)
    return client


@pytest.fixture
def photo_service():
    """Replace the Cloudinary-backed service used by the views."""
    service = Mock()
    service.add_photo.return_value = UploadResult(
        secure_url="https://res.cloudinary.com/demo/image/upload/v1/abc123.jpg",
        public_id="abc123",
    )
    service.delete_photo.return_value = DeletionResult(result="ok")
    with patch("members.views.get_photo_service", return_value=service):
        yield service
