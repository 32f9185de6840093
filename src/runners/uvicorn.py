"""Uvicorn runner."""

import logging

import uvicorn

from log import get_logger
from models.config import ServiceConfiguration

logger = get_logger(__name__)


def start_uvicorn(configuration: ServiceConfiguration) -> None:
    """Start Uvicorn-based REST API service."""
    logger.info("Starting Uvicorn on %s:%d", configuration.host, configuration.port)

    log_level = logging.INFO

    # the configuration points to a file holding the key password
    key_password = ""
    if configuration.tls_config.tls_key_password is not None:
        key_password = configuration.tls_config.tls_key_password.read_text(
            encoding="utf-8"
        ).strip()

    # please note:
    # TLS fields can be None, which means we will pass those values as None to uvicorn.run
    uvicorn.run(
        "app.main:app",
        host=configuration.host,
        port=configuration.port,
        workers=configuration.workers,
        log_level=log_level,
        ssl_keyfile=configuration.tls_config.tls_key_path,
        ssl_certfile=configuration.tls_config.tls_certificate_path,
        ssl_keyfile_password=key_password,
        use_colors=configuration.color_log,
        access_log=configuration.access_log,
    )
