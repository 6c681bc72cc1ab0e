import logging

import uvicorn

from infrastructure.logging_setup import setup_logging
from infrastructure.settings import load_settings

logger = logging.getLogger(__name__)


def run() -> None:
    settings = load_settings()
    setup_logging(settings.log_level)

    if settings.is_production:
        # Production traffic arrives through the managed host, not a socket.
        logger.info(
            "APP_ENV=production: no local listener. Deploy "
            "backend_fastapi.lambda_handler.handler behind API Gateway."
        )
        return

    logger.info(
        f"Starting server at http://{settings.host}:{settings.port} "
        f"in {settings.app_env} mode (Reload: {settings.reload})"
    )

    uvicorn.run(
        "backend_fastapi.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        log_level=settings.log_level,
    )


if __name__ == "__main__":
    run()
