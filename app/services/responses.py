from __future__ import annotations

from datetime import datetime, timezone
from typing import Any


def utc_timestamp() -> str:
    """ISO-8601 UTC timestamp with millisecond precision, e.g. ``2024-05-01T09:30:00.123Z``."""

    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def success(data: Any, message: str | None = None) -> dict[str, Any]:
    body: dict[str, Any] = {"status": "success", "data": data, "timestamp": utc_timestamp()}
    if message:
        body["message"] = message
    return body


def failure(error: str, detail: str | None = None) -> dict[str, Any]:
    body: dict[str, Any] = {"status": "error", "error": error, "timestamp": utc_timestamp()}
    if detail:
        body["detail"] = detail
    return body
