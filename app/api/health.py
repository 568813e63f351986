from __future__ import annotations

import asyncio

import structlog
from fastapi import APIRouter, Depends, Response

from app.api.dependencies import get_app_settings
from app.config import Settings
from app.models.schemas import DelayResult, HealthResponse, SuccessResponse
from app.services.responses import success, utc_timestamp

router = APIRouter(tags=["ヘルスチェック"])
logger = structlog.get_logger(__name__)

DELAY_COMPLETE_MESSAGE = "遅延レスポンス完了"


@router.get(
    "/",
    response_model=HealthResponse,
    summary="ヘルスチェック",
    description="APIサーバーの状態を確認します",
)
async def root() -> dict[str, str]:
    logger.debug("health.root")
    return {"status": "ok", "timestamp": utc_timestamp()}


@router.get(
    "/healthz",
    response_model=HealthResponse,
    summary="Kubernetesヘルスチェック",
    description="Kubernetesの livenessProbe 用エンドポイント",
)
async def healthz() -> dict[str, str]:
    logger.debug("health.healthz")
    return {"status": "ok", "timestamp": utc_timestamp()}


@router.get(
    "/status",
    summary="Probe専用エンドポイント",
    description="常に空のボディで 200 を返します",
    responses={200: {"description": "正常稼働中", "content": {"text/plain": {}}}},
)
async def status() -> Response:
    return Response(status_code=200)


@router.get(
    "/delay",
    response_model=SuccessResponse[DelayResult],
    response_model_exclude_none=True,
    summary="遅延レスポンス",
    description="readinessProbe の確認用に一定時間待ってから 200 を返します",
)
async def delay(settings: Settings = Depends(get_app_settings)) -> dict:
    delay_ms = settings.delay_response_ms
    logger.info("delay.started", delay_ms=delay_ms)
    # Only this response waits; the event loop keeps serving other requests.
    await asyncio.sleep(delay_ms / 1000.0)
    return success(DelayResult(delay=f"{delay_ms}ms"), DELAY_COMPLETE_MESSAGE)
