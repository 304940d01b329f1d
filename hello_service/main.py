"""Main module entrypoint for local runtime execution.

This module validates startup configuration and launches the FastAPI service.
"""

import logging

import uvicorn

from hello_service.bootstrap import bootstrap_create_application
from hello_service.config import SettingsLoadError, config_load_settings
from hello_service.logging_config import logging_configure

logger = logging.getLogger(__name__)


def main() -> None:
    """Run the HTTP server with validated startup configuration.

    Returns:
        None: This function does not return a runtime value.

    Raises:
        SystemExit: Raised with status 1 when configuration validation fails.
    """

    try:
        settings = config_load_settings()
    except SettingsLoadError as error:
        logging_configure()
        logger.critical("%s", error)
        raise SystemExit(1) from error

    logging_configure(settings.log_level)
    application = bootstrap_create_application(settings)

    logger.info("Starting server on port %d", settings.port)
    # Request lines come from the route middleware, not uvicorn's access log.
    uvicorn.run(
        application,
        host=settings.application_host,
        port=settings.port,
        timeout_keep_alive=settings.server_idle_timeout_seconds,
        access_log=False,
    )


if __name__ == "__main__":
    main()
