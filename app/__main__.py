"""
Run the API server:

  python -m app

Binds to HOST:PORT from settings (PORT defaults to 3001).
"""

import logging
import sys

import uvicorn

from app.core.config import get_settings
from app.main import app

logger = logging.getLogger(__name__)


def main() -> int:
    settings = get_settings()
    logger.info("Auth API listening on port %s", settings.PORT)
    logger.info("Allowed FRONTEND_ORIGIN: %s", settings.FRONTEND_ORIGIN)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())
    return 0


if __name__ == "__main__":
    sys.exit(main())
