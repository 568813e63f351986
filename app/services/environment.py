from __future__ import annotations

import os
from collections.abc import Mapping

from app.models.schemas import EnvironmentSnapshot

UNSET = "未設定"
MASK = "****MASKED****"


class EnvironmentAccessor:
    """Reads process environment variables at call time.

    ConfigMap and Secret values reach the pod as environment variables, so
    nothing here is cached: every call reflects the live environment.
    Empty values are treated the same as unset ones.
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = environ

    @property
    def environ(self) -> Mapping[str, str]:
        return os.environ if self._environ is None else self._environ

    def get_value(self, key: str, default: str = UNSET) -> str:
        return self.environ.get(key) or default

    def get_masked(self, key: str) -> str:
        return MASK if self.environ.get(key) else UNSET

    def is_production(self) -> bool:
        return self.environ.get("NODE_ENV") == "production"

    def snapshot(self) -> EnvironmentSnapshot:
        return EnvironmentSnapshot(
            port=self.get_value("PORT"),
            current_env=self.get_value("CURRENT_ENV"),
            config_message=self.get_value("CONFIG_MESSAGE"),
            secret_key=self.get_masked("SECRET_KEY"),
        )
