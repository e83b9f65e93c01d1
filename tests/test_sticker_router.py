from dependency_injector import providers
from sqlalchemy.exc import TimeoutError as PoolTimeoutError

from conftest import add_sticker, auth_headers, create_user
from souldiary.schemas.sticker import PurchaseResult


class FakeStickerService:
    def __init__(self, db=None):
        self.db = db

    def purchase_sticker(self, user_id, sticker_id, claimed_price=None):
        return PurchaseResult(sticker_id=sticker_id, price=100, balance_after=4900)


class PoolExhaustedStickerService(FakeStickerService):
    def purchase_sticker(self, user_id, sticker_id, claimed_price=None):
        raise PoolTimeoutError("QueuePool limit of size 5 overflow 10 reached")


def test_catalog_is_public(client, session_factory):
    add_sticker(session_factory, "Heart", 1000, image="/stickers/heart.png")
    add_sticker(session_factory, "Star", 2000, image="/stickers/star.png")

    res = client.get("/get-stickers")

    assert res.status_code == 200
    stickers = res.json()["data"]["stickers"]
    assert [(s["name"], s["price"], s["image"]) for s in stickers] == [
        ("Heart", 1000, "/stickers/heart.png"),
        ("Star", 2000, "/stickers/star.png"),
    ]
    assert all(s["sticker_id"] == s["id"] for s in stickers)
    assert [s["image_url"] for s in stickers] == ["/stickers/heart.png", "/stickers/star.png"]


def test_buy_sticker_flow(client, session_factory, settings):
    create_user(session_factory, settings)
    cat = add_sticker(session_factory, "Cat", 3000)
    rainbow = add_sticker(session_factory, "Rainbow", 3000)
    headers = auth_headers(settings)

    res = client.post("/buy-sticker", json={"sticker_id": cat, "price": 3000}, headers=headers)

    assert res.status_code == 200
    assert res.json()["data"] == {"sticker_id": cat, "price": 3000, "balance_after": 2000}

    res = client.post("/buy-sticker", json={"sticker_id": rainbow, "price": 3000}, headers=headers)

    assert res.status_code == 400
    assert res.json()["error"]["code"] == "BALANCE_001"
    assert client.get("/get-user-info", headers=headers).json()["data"]["user"]["coin"] == 2000

    owned = client.get("/get-user-stickers", headers=headers)
    assert owned.status_code == 200
    assert [s["sticker_id"] for s in owned.json()["data"]["stickers"]] == [cat]
    assert owned.json()["data"]["stickers"][0]["image_url"] == "/stickers/test.png"


def test_buy_owned_sticker_is_conflict(client, session_factory, settings):
    create_user(session_factory, settings)
    heart = add_sticker(session_factory, "Heart", 1000)
    headers = auth_headers(settings)
    client.post("/buy-sticker", json={"sticker_id": heart}, headers=headers)

    res = client.post("/buy-sticker", json={"sticker_id": heart}, headers=headers)

    assert res.status_code == 409
    assert res.json()["error"]["code"] == "STICKER_002"


def test_buy_unknown_sticker_is_404(client, session_factory, settings):
    create_user(session_factory, settings)

    res = client.post("/buy-sticker", json={"sticker_id": 77}, headers=auth_headers(settings))

    assert res.status_code == 404


def test_buy_without_sticker_id_is_400(client, session_factory, settings):
    create_user(session_factory, settings)

    res = client.post("/buy-sticker", json={"price": 3000}, headers=auth_headers(settings))

    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_001"


def test_user_without_stickers_gets_404(client, session_factory, settings):
    create_user(session_factory, settings)

    res = client.get("/get-user-stickers", headers=auth_headers(settings))

    assert res.status_code == 404
    assert res.json()["success"] is False


def test_buy_requires_token(client):
    assert client.post("/buy-sticker", json={"sticker_id": 1}).status_code == 401


def test_buy_uses_container_service(client, container, settings):
    container.sticker_service.override(providers.Factory(FakeStickerService))

    res = client.post("/buy-sticker", json={"sticker_id": 3}, headers=auth_headers(settings))

    assert res.status_code == 200
    assert res.json()["data"]["balance_after"] == 4900


def test_pool_timeout_is_retryable_500(client, container, settings):
    container.sticker_service.override(providers.Factory(PoolExhaustedStickerService))

    res = client.post("/buy-sticker", json={"sticker_id": 3}, headers=auth_headers(settings))

    assert res.status_code == 500
    body = res.json()
    assert body["error"]["code"] == "DB_001"
    assert body["error"]["details"]["retryable"] is True
    assert "QueuePool" not in body["message"]
