from __future__ import annotations


class ApiError(Exception):
    """Failure that maps onto a known HTTP status and error envelope."""

    status_code: int = 500

    def __init__(self, message: str, detail: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.detail = detail


class ValidationError(ApiError):
    status_code = 400


class ConfigurationMissing(ApiError):
    status_code = 500


class ProductionRestricted(ApiError):
    status_code = 403


class UnhandledFault(RuntimeError):
    """Unexpected server fault, reported as a 500 by the error boundary."""
