from __future__ import annotations

import logging

import uvicorn

from .logging_setup import setup_logging
from .main import create_app
from .settings import get_settings

logger = logging.getLogger(__name__)


# PUBLIC_INTERFACE
def main() -> None:
    """
    Start the service on the configured host and port.

    uvicorn exits the process with a non-zero status when the port cannot be bound.
    """
    settings = get_settings()
    setup_logging(settings.log_level)

    app = create_app(settings=settings)
    logger.info("Server starting on port %d...", settings.port)
    # log_config=None keeps uvicorn on the handlers installed above
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
