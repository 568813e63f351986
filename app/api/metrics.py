from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import Response
from prometheus_client import CONTENT_TYPE_LATEST

from app.api.dependencies import get_http_metrics
from app.observability.metrics import HttpMetrics


router = APIRouter(tags=["メトリクス"])

_EXAMPLE = (
    "# HELP api_http_requests_total Total number of HTTP requests\n"
    "# TYPE api_http_requests_total counter\n"
    'api_http_requests_total{code="200",method="GET",route="/"} 10.0\n'
)


@router.get(
    "/metrics",
    summary="Prometheus メトリクス",
    description="Prometheus テキスト形式のメトリクスデータを返します",
    response_class=Response,
    responses={200: {"description": "メトリクスデータ", "content": {"text/plain": {"example": _EXAMPLE}}}},
)
async def metrics(http_metrics: HttpMetrics = Depends(get_http_metrics)) -> Response:
    return Response(content=http_metrics.render(), media_type=CONTENT_TYPE_LATEST)
