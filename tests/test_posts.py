from app.config import get_settings
from app.main import create_app
from app.services.post_store import PostStore


async def test_list_posts_returns_seeded_posts(api_client, assert_envelope) -> None:
    resp = await api_client.get("/posts")
    body = assert_envelope(resp, 200, "success")
    assert isinstance(body["data"], list)
    assert [post["id"] for post in body["data"]] == [1, 2, 3]
    assert set(body["data"][0]) == {"id", "title", "content"}
    assert "message" not in body


async def test_create_post_assigns_next_id_and_is_listed(api_client, assert_envelope) -> None:
    before = (await api_client.get("/posts")).json()["data"]

    resp = await api_client.post("/posts", json={"title": "テスト投稿", "content": "テスト内容"})
    body = assert_envelope(resp, 201, "success")
    assert body["data"] == {"id": len(before) + 1, "title": "テスト投稿", "content": "テスト内容"}

    second = await api_client.post("/posts", json={"title": "次の投稿", "content": "続き"})
    assert second.json()["data"]["id"] == len(before) + 2

    after = (await api_client.get("/posts")).json()["data"]
    assert after[-2]["title"] == "テスト投稿"
    assert after[-1]["title"] == "次の投稿"


async def test_create_post_missing_content_returns_400(api_client, assert_envelope) -> None:
    resp = await api_client.post("/posts", json={"title": "テスト投稿"})
    body = assert_envelope(resp, 400, "error")
    assert "必須" in body["error"]


async def test_create_post_empty_title_returns_400(api_client, assert_envelope) -> None:
    resp = await api_client.post("/posts", json={"title": "", "content": "本文"})
    body = assert_envelope(resp, 400, "error")
    assert "必須" in body["error"]


async def test_create_post_without_body_returns_400(api_client, assert_envelope) -> None:
    resp = await api_client.post("/posts")
    body = assert_envelope(resp, 400, "error")
    assert "必須" in body["error"]


async def test_create_post_with_wrong_types_returns_400(api_client, assert_envelope) -> None:
    resp = await api_client.post("/posts", json={"title": ["not", "a", "string"], "content": "本文"})
    body = assert_envelope(resp, 400, "error")
    assert body["error"] == "リクエストが不正です"
    assert "title" in body["detail"]


async def test_failed_create_does_not_consume_an_id(api_client) -> None:
    await api_client.post("/posts", json={"title": "only title"})
    resp = await api_client.post("/posts", json={"title": "t", "content": "c"})
    assert resp.json()["data"]["id"] == 4


def test_each_app_owns_its_store() -> None:
    empty = create_app(post_store=PostStore())
    seeded = create_app()
    assert empty.state.post_store is not seeded.state.post_store
    assert empty.state.post_store.list_all() == []
    assert len(seeded.state.post_store) == 3


def test_seed_posts_can_be_disabled(monkeypatch) -> None:
    monkeypatch.setenv("SEED_POSTS", "false")
    get_settings.cache_clear()
    assert create_app().state.post_store.list_all() == []
