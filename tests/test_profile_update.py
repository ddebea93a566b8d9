"""Profile update: the caller edits their own profile only.

Invariants:
    - Successful updates return 204 and are persisted
    - Only the editable fields are mapped; identity fields are ignored
    - An update that changes nothing still commits
    - A failed commit is reported as 400 "Failed to update user"
"""

from unittest.mock import patch

from rest_framework.test import APIClient

from members.models import MemberProfile

URL = "/api/users/"


def test_updates_own_profile(api_client, caller):
    res = api_client.put(URL, {"introduction": "New intro", "city": "Porto"}, format="json")

    assert res.status_code == 204
    caller.refresh_from_db()
    assert caller.introduction == "New intro"
    assert caller.city == "Porto"


def test_partial_update_keeps_other_fields(api_client, caller):
    MemberProfile.objects.filter(pk=caller.pk).update(country="Spain", interests="Chess")

    api_client.put(URL, {"interests": "Go"}, format="json")

    caller.refresh_from_db()
    assert caller.interests == "Go"
    assert caller.country == "Spain"


def test_ignores_non_editable_fields(api_client, caller):
    res = api_client.put(URL, {"gender": "female", "known_as": "Robert"}, format="json")

    assert res.status_code == 204
    caller.refresh_from_db()
    assert caller.gender == "male"
    assert caller.known_as == "Bob"


def test_update_without_changes_still_succeeds(api_client):
    res = api_client.put(URL, {}, format="json")

    assert res.status_code == 204


def test_updates_the_caller_not_another_member(api_client, make_member):
    other = make_member("eve", gender="female", city="Oslo")

    api_client.put(URL, {"city": "Rome"}, format="json")

    other.refresh_from_db()
    assert other.city == "Oslo"


def test_invalid_body(api_client):
    res = api_client.put(URL, {"city": "x" * 200}, format="json")

    assert res.status_code == 400
    assert "city" in res.json()["errors"]


def test_failed_commit(api_client):
    with patch("members.views.UnitOfWork.complete", return_value=False):
        res = api_client.put(URL, {"city": "Rome"}, format="json")

    assert res.status_code == 400
    assert res.json() == {"detail": "Failed to update user"}


def test_caller_without_profile(django_user_model):
    user = django_user_model.objects.create_user(username="ghost", password="x")
    client = APIClient()
    client.force_authenticate(user=user)

    res = client.put(URL, {"city": "Rome"}, format="json")

    assert res.status_code == 404
