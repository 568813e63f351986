from __future__ import annotations

import structlog
import uvicorn
from dotenv import load_dotenv

from app.config import get_settings
from app.observability.logging import configure_logging
from app.services.environment import EnvironmentAccessor


def main() -> None:
    # ConfigMap/Secret values may also come from a local .env during development.
    load_dotenv()
    settings = get_settings()
    configure_logging(settings.log_level, json_logs=settings.log_json)

    # Imported late so the module-level app sees the .env values.
    from app.main import app

    logger = structlog.get_logger("startup")
    base = f"http://{settings.host}:{settings.port}"
    logger.info(
        "server.starting",
        app_name=settings.app_name,
        url=base,
        docs_url=f"{base}/api-docs",
        current_env=EnvironmentAccessor().get_value("CURRENT_ENV", "development"),
        port=settings.port,
    )

    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
