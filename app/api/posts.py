from __future__ import annotations

import structlog
from fastapi import APIRouter, Depends

from app.api.dependencies import get_post_store
from app.models.schemas import ErrorResponse, Post, PostCreate, SuccessResponse
from app.services.post_store import PostStore
from app.services.responses import success

router = APIRouter(tags=["投稿"])
logger = structlog.get_logger(__name__)


@router.get(
    "/posts",
    response_model=SuccessResponse[list[Post]],
    response_model_exclude_none=True,
    summary="投稿一覧の取得",
    description="全ての投稿を取得します",
)
async def list_posts(store: PostStore = Depends(get_post_store)) -> dict:
    posts = store.list_all()
    logger.info("posts.listed", count=len(posts))
    return success(posts)


@router.post(
    "/posts",
    status_code=201,
    response_model=SuccessResponse[Post],
    response_model_exclude_none=True,
    summary="新規投稿の作成",
    description="新しい投稿を作成します。title と content は必須です",
    responses={400: {"model": ErrorResponse, "description": "バリデーションエラー"}},
)
async def create_post(
    payload: PostCreate | None = None,
    store: PostStore = Depends(get_post_store),
) -> dict:
    payload = payload or PostCreate()
    post = store.create(title=payload.title, content=payload.content)
    return success(post)
