from __future__ import annotations

import asyncio
import contextlib
from collections.abc import AsyncIterator

import structlog
from fastapi import FastAPI

from app.api.environment import router as environment_router
from app.api.error_handlers import ErrorBoundaryMiddleware, register_exception_handlers
from app.api.health import router as health_router
from app.api.load_test import router as load_test_router
from app.api.metrics import router as metrics_router
from app.api.posts import router as posts_router
from app.config import Settings, get_settings
from app.observability.logging import configure_logging
from app.observability.metrics import HttpMetrics, monitor_event_loop_lag
from app.observability.middleware import RequestContextMiddleware
from app.services.environment import EnvironmentAccessor
from app.services.post_store import PostStore, seeded_store


DESCRIPTION = "Kubernetes環境で動作するサンプルAPIサーバー"

OPENAPI_TAGS = [
    {"name": "ヘルスチェック", "description": "システムの状態確認"},
    {"name": "投稿", "description": "投稿の管理"},
    {"name": "設定", "description": "環境設定の確認"},
    {"name": "テスト", "description": "テスト用エンドポイント"},
    {"name": "メトリクス", "description": "Prometheus メトリクス"},
]


@contextlib.asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    lag_task = asyncio.create_task(monitor_event_loop_lag(app.state.metrics))
    structlog.get_logger("startup").info("app.started", app_name=app.title)
    try:
        yield
    finally:
        lag_task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await lag_task


def create_app(
    settings: Settings | None = None,
    *,
    post_store: PostStore | None = None,
    metrics: HttpMetrics | None = None,
    environment: EnvironmentAccessor | None = None,
) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.log_level, json_logs=settings.log_json)

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description=DESCRIPTION,
        openapi_tags=OPENAPI_TAGS,
        servers=[{"url": settings.base_url, "description": "ローカル開発サーバー"}],
        docs_url="/api-docs",
        redoc_url=None,
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.post_store = post_store if post_store is not None else (seeded_store() if settings.seed_posts else PostStore())
    app.state.metrics = metrics if metrics is not None else HttpMetrics()
    app.state.environment = environment if environment is not None else EnvironmentAccessor()

    register_exception_handlers(app)
    # Last added is outermost: the request context sees the boundary's 500s.
    app.add_middleware(ErrorBoundaryMiddleware)
    app.add_middleware(RequestContextMiddleware, metrics=app.state.metrics)

    app.include_router(health_router)
    app.include_router(posts_router)
    app.include_router(environment_router)
    app.include_router(load_test_router)
    app.include_router(metrics_router)
    return app


app = create_app()
