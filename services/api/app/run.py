"""API service entrypoint.

Configures logging, then serves `services.api.app.main:app` with uvicorn on
the configured host/port (`PORT`, default 3000).
"""

import logging

import uvicorn
from common.logging import configure_logging

from .settings import get_settings

logger = logging.getLogger(__name__)


def main() -> int:
    """Run the API server until interrupted.

    Returns:
        The process exit code (0 = clean shutdown).
    """
    settings = get_settings()
    configure_logging(settings.log_level)

    logger.info("OPFTS Backend server running on port %s", settings.port)
    logger.info("Visit: http://localhost:%s", settings.port)

    # access lines come from AccessLogMiddleware
    uvicorn.run(
        "services.api.app.main:app",
        host=settings.host,
        port=settings.port,
        access_log=False,
        log_config=None,
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
