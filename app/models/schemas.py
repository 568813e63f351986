from __future__ import annotations

from typing import Generic, Literal, TypeVar

from pydantic import BaseModel, ConfigDict, Field


T = TypeVar("T")


class Post(BaseModel):
    id: int
    title: str
    content: str


class PostCreate(BaseModel):
    # Presence is checked by the store so that a missing field is a 400, not a 422.
    title: str | None = Field(default=None, examples=["投稿タイトル"])
    content: str | None = Field(default=None, examples=["投稿内容"])


class SuccessResponse(BaseModel, Generic[T]):
    status: Literal["success"] = "success"
    data: T
    timestamp: str
    message: str | None = None


class ErrorResponse(BaseModel):
    status: Literal["error"] = "error"
    error: str
    timestamp: str
    detail: str | None = None


class HealthResponse(BaseModel):
    status: Literal["ok"] = "ok"
    timestamp: str


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class EnvInfo(_CamelModel):
    port: str
    current_env: str = Field(alias="currentEnv")


class ConfigInfo(BaseModel):
    message: str
    timestamp: str


class SecretInfo(_CamelModel):
    secret_key: str = Field(alias="secretKey")


class EnvironmentSnapshot(_CamelModel):
    port: str
    current_env: str = Field(alias="currentEnv")
    config_message: str = Field(alias="configMessage")
    secret_key: str = Field(alias="secretKey")


class DelayResult(BaseModel):
    delay: str


class CpuLoadResult(BaseModel):
    duration: str


class MemoryLoadResult(BaseModel):
    size: str
    duration: str
