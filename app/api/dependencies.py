from __future__ import annotations

from fastapi import Request

from app.config import Settings
from app.observability.metrics import HttpMetrics
from app.services.environment import EnvironmentAccessor
from app.services.post_store import PostStore


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_post_store(request: Request) -> PostStore:
    return request.app.state.post_store


def get_environment(request: Request) -> EnvironmentAccessor:
    return request.app.state.environment


def get_http_metrics(request: Request) -> HttpMetrics:
    return request.app.state.metrics
