from __future__ import annotations

import structlog
from fastapi import APIRouter, Depends

from app.api.dependencies import get_environment
from app.errors import ConfigurationMissing
from app.models.schemas import (
    ConfigInfo,
    EnvInfo,
    EnvironmentSnapshot,
    ErrorResponse,
    SecretInfo,
    SuccessResponse,
)
from app.services.environment import EnvironmentAccessor
from app.services.responses import success, utc_timestamp

router = APIRouter(tags=["設定"])
logger = structlog.get_logger(__name__)

CONFIG_MISSING_MESSAGE = "ConfigMap未反映: CONFIG_MESSAGE が見つかりません"


@router.get(
    "/env",
    response_model=SuccessResponse[EnvInfo],
    response_model_exclude_none=True,
    summary="環境変数の確認",
    description="現在の環境変数設定を確認します",
)
async def read_env(env: EnvironmentAccessor = Depends(get_environment)) -> dict:
    logger.info("env.requested")
    return success(EnvInfo(port=env.get_value("PORT"), current_env=env.get_value("CURRENT_ENV")))


@router.get(
    "/config",
    response_model=SuccessResponse[ConfigInfo],
    response_model_exclude_none=True,
    summary="ConfigMapの確認",
    description="Kubernetes ConfigMap から渡される CONFIG_MESSAGE を確認します",
    responses={500: {"model": ErrorResponse, "description": "ConfigMap未設定エラー"}},
)
async def read_config(env: EnvironmentAccessor = Depends(get_environment)) -> dict:
    message = env.environ.get("CONFIG_MESSAGE")
    if not message:
        logger.error("config.missing", variable="CONFIG_MESSAGE")
        raise ConfigurationMissing(CONFIG_MISSING_MESSAGE)

    logger.info("config.loaded", config_message=message)
    return success(ConfigInfo(message=message, timestamp=utc_timestamp()))


@router.get(
    "/secret",
    response_model=SuccessResponse[SecretInfo],
    response_model_exclude_none=True,
    summary="Secretの確認",
    description="SECRET_KEY の設定有無をマスクした値で確認します",
)
async def read_secret(env: EnvironmentAccessor = Depends(get_environment)) -> dict:
    masked = env.get_masked("SECRET_KEY")
    logger.info("secret.checked", secret_key=masked)
    return success(SecretInfo(secret_key=masked))


@router.get(
    "/env-check",
    response_model=SuccessResponse[EnvironmentSnapshot],
    response_model_exclude_none=True,
    summary="環境変数・ConfigMap・Secretの一括確認",
    description="PORT, CURRENT_ENV, CONFIG_MESSAGE, SECRET_KEY(マスク済み) をまとめて返します",
)
async def env_check(env: EnvironmentAccessor = Depends(get_environment)) -> dict:
    logger.info("env_check.requested")
    return success(env.snapshot())
