from __future__ import annotations

import logging
from collections.abc import Iterable
from threading import Lock

from app.errors import ValidationError
from app.models.schemas import Post

logger = logging.getLogger(__name__)

MISSING_FIELDS_MESSAGE = "タイトルと内容は必須です"

_SEED_POSTS = (
    ("初期投稿", "ようこそ"),
    ("2件目の投稿", "こんにちは"),
    ("3件目の投稿", "こんばんは"),
)


class PostStore:
    """Append-only, process-local list of posts (resets on restart)."""

    def __init__(self, posts: Iterable[Post] | None = None) -> None:
        self._lock = Lock()
        self._posts: list[Post] = list(posts or [])

    def __len__(self) -> int:
        with self._lock:
            return len(self._posts)

    def list_all(self) -> list[Post]:
        with self._lock:
            return list(self._posts)

    def create(self, title: str | None, content: str | None) -> Post:
        if not title or not content:
            raise ValidationError(MISSING_FIELDS_MESSAGE)

        # Id assignment and append are one step so concurrent writers never share an id.
        with self._lock:
            post = Post(id=len(self._posts) + 1, title=title, content=content)
            self._posts.append(post)

        logger.info("posts.created", extra={"post_id": post.id, "title": post.title})
        return post


def seeded_store() -> PostStore:
    return PostStore(
        Post(id=index, title=title, content=content)
        for index, (title, content) in enumerate(_SEED_POSTS, start=1)
    )
