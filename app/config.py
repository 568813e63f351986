from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = Field(default="k8s-python-api-8000", alias="APP_NAME")
    app_version: str = Field(default="1.0.0", alias="APP_VERSION")
    host: str = Field(default="0.0.0.0", alias="HOST")
    port: int = Field(default=8000, alias="PORT")

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_json: bool = Field(default=True, alias="LOG_JSON")

    delay_response_ms: int = Field(default=3000, alias="DELAY_RESPONSE_MS")
    load_test_duration_ms: int = Field(default=8000, alias="LOAD_TEST_DURATION_MS")
    memory_test_size_mb: int = Field(default=100, alias="MEMORY_TEST_SIZE_MB")
    seed_posts: bool = Field(default=True, alias="SEED_POSTS")

    @property
    def base_url(self) -> str:
        return f"http://localhost:{self.port}"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
