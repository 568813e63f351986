from concurrent.futures import ThreadPoolExecutor

import pytest

from app.errors import ValidationError
from app.services.post_store import PostStore, seeded_store


def test_create_appends_with_count_plus_one_ids() -> None:
    store = PostStore()
    first = store.create("a", "b")
    second = store.create("c", "d")

    assert (first.id, second.id) == (1, 2)
    assert store.list_all() == [first, second]


def test_create_rejects_missing_fields() -> None:
    store = PostStore()
    for title, content in ((None, "x"), ("x", None), ("", "x"), ("x", "")):
        with pytest.raises(ValidationError) as exc_info:
            store.create(title, content)
        assert exc_info.value.status_code == 400
        assert "必須" in exc_info.value.message
    assert len(store) == 0


def test_list_all_returns_a_copy() -> None:
    store = seeded_store()
    listed = store.list_all()
    listed.clear()
    assert len(store) == 3


def test_concurrent_creates_get_unique_ids() -> None:
    store = PostStore()
    with ThreadPoolExecutor(max_workers=8) as pool:
        posts = list(pool.map(lambda i: store.create(f"t{i}", "c"), range(200)))

    ids = sorted(post.id for post in posts)
    assert ids == list(range(1, 201))


def test_seeded_store_holds_demo_posts() -> None:
    titles = [post.title for post in seeded_store().list_all()]
    assert titles == ["初期投稿", "2件目の投稿", "3件目の投稿"]
