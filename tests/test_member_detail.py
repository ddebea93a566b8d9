"""Single member lookup by username.

Invariants:
    - Known usernames return the member projection
    - Unknown usernames return an empty 204 rather than 404
"""

URL = "/api/users/{}/"


def test_returns_member(api_client, make_member, add_photo):
    carol = make_member("carol", gender="female", introduction="Hi there")
    add_photo(carol, url="https://img.example/c1.jpg", is_main=False)
    add_photo(carol, url="https://img.example/c2.jpg", is_main=True)

    res = api_client.get(URL.format("carol"))

    assert res.status_code == 200
    body = res.json()
    assert body["username"] == "carol"
    assert body["introduction"] == "Hi there"
    assert body["photo_url"] == "https://img.example/c2.jpg"
    assert [p["url"] for p in body["photos"]] == [
        "https://img.example/c1.jpg",
        "https://img.example/c2.jpg",
    ]


def test_member_without_photos_has_no_photo_url(api_client, make_member):
    make_member("dan")

    body = api_client.get(URL.format("dan")).json()

    assert body["photo_url"] is None
    assert body["photos"] == []


def test_caller_can_fetch_self(api_client):
    res = api_client.get(URL.format("bob"))

    assert res.status_code == 200
    assert res.json()["username"] == "bob"


def test_unknown_member_returns_empty_result(api_client):
    res = api_client.get(URL.format("nobody"))

    assert res.status_code == 204
    assert res.content == b""
