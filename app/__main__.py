"""
Run the service: python -m app

Firebase is initialized before the server binds its port, so a bad
credential stops the process with exit status 1 and no socket opened.
"""

import sys

import structlog
import uvicorn

from app.core.config import get_settings
from app.core.container import build_container
from app.core.credentials import ConfigurationError
from app.main import create_app

logger = structlog.get_logger("startup")


def main() -> int:
    settings = get_settings()

    try:
        container = build_container(settings)
    except ConfigurationError as e:
        logger.error("startup.configuration_error", error=str(e))
        return 1

    logger.info("startup.listening", host=settings.HOST, port=settings.PORT)
    uvicorn.run(create_app(container), host=settings.HOST, port=settings.PORT)
    return 0


if __name__ == "__main__":
    sys.exit(main())
