import pytest

from conftest import auth_headers, create_user


@pytest.fixture
def users(session_factory, settings):
    create_user(session_factory, settings, user_id="alice", name="Alice")
    create_user(session_factory, settings, user_id="bob", name="Bob")


def _add(client, headers, **overrides):
    payload = {"date": "2024-05-01", "title": "Spring", "one": "sunny", "content": "walked"}
    payload.update(overrides)
    res = client.post("/add-diary", json=payload, headers=headers)
    assert res.status_code == 200
    return res.json()["data"]["id"]


def test_add_and_get_diary(client, settings, users):
    headers = auth_headers(settings)
    diary_id = _add(client, headers)

    res = client.get(f"/get-diary/{diary_id}", headers=headers)

    assert res.status_code == 200
    diary = res.json()["data"]["diary"]
    assert diary["id"] == diary_id
    assert diary["user_id"] == "alice"
    assert diary["date"] == "2024-05-01"
    assert diary["title"] == "Spring"
    assert diary["one"] == "sunny"
    assert diary["content"] == "walked"


def test_list_is_newest_date_first_and_only_own(client, settings, users):
    alice = auth_headers(settings)
    bob = auth_headers(settings, user_id="bob", name="Bob")
    _add(client, alice, date="2024-05-01", title="older")
    _add(client, alice, date="2024-06-01", title="newer")
    _add(client, bob, title="bob's")

    res = client.get("/get-diaries", headers=alice)

    assert res.status_code == 200
    data = res.json()["data"]
    assert data["count"] == 2
    assert [d["title"] for d in data["diaries"]] == ["newer", "older"]


def test_add_diary_without_title_is_400(client, settings, users):
    res = client.post(
        "/add-diary", json={"date": "2024-05-01"}, headers=auth_headers(settings)
    )

    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_001"


def test_other_users_diary_looks_like_missing_diary(client, settings, users):
    diary_id = _add(client, auth_headers(settings))
    bob = auth_headers(settings, user_id="bob", name="Bob")

    foreign = client.get(f"/get-diary/{diary_id}", headers=bob)
    missing = client.get("/get-diary/999999", headers=bob)

    assert foreign.status_code == missing.status_code == 404
    assert foreign.json() == missing.json()

    foreign_delete = client.delete(f"/delete-diary/{diary_id}", headers=bob)
    missing_delete = client.delete("/delete-diary/999999", headers=bob)

    assert foreign_delete.status_code == missing_delete.status_code == 404
    assert foreign_delete.json() == missing_delete.json()

    # 삭제 시도 후에도 원래 주인에게는 그대로 남아 있어야 함
    assert client.get(f"/get-diary/{diary_id}", headers=auth_headers(settings)).status_code == 200


def test_delete_diary(client, settings, users):
    headers = auth_headers(settings)
    diary_id = _add(client, headers)

    res = client.delete(f"/delete-diary/{diary_id}", headers=headers)

    assert res.status_code == 200
    assert res.json()["success"] is True
    assert client.get(f"/get-diary/{diary_id}", headers=headers).status_code == 404


def test_diary_routes_require_token(client):
    assert client.get("/get-diaries").status_code == 401
    assert client.post("/add-diary", json={}).status_code == 401
