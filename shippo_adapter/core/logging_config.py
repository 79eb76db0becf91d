# shippo_adapter/core/logging_config.py
"""
Centralized logging configuration for the adapter.

Library modules only create loggers; entry points (FastAPI app, CLI) call
configure_logging() once.
"""

import logging
import os
from typing import Optional


LICENSE_NOTICE = """[Velocity BPA Licensing Notice]

This Shippo adapter is licensed under the Business Source License 1.1 (BSL 1.1).

Use of this adapter by for-profit organizations in production environments requires a commercial license from Velocity BPA.

For licensing information, visit https://velobpa.com/licensing or contact licensing@velobpa.com."""


def configure_logging(level: Optional[str] = None):
    """
    Configure logging for the adapter.

    Sets appropriate log levels for different modules:
    - Adapter code: INFO (or LOG_LEVEL / the level argument)
    - HTTP clients (httpx, httpcore): WARNING only
    - uvicorn access log: WARNING only
    """
    log_level = (level or os.environ.get("LOG_LEVEL", "INFO")).upper()

    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler()]
    )

    # Quiet noisy HTTP client loggers
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    logging.getLogger("shippo_adapter").setLevel(getattr(logging, log_level, logging.INFO))

    logger = logging.getLogger(__name__)
    logger.info(f"Logging configured at level: {log_level}")


class LicenseNotice:
    """
    One-shot licensing notice.

    The owner (dispatcher, trigger) creates one instance and calls emit()
    on every execution; only the first call logs.
    """

    def __init__(self, enabled: bool = True, logger: Optional[logging.Logger] = None,
                 message: str = LICENSE_NOTICE):
        self.enabled = enabled
        self.logger = logger or logging.getLogger("shippo_adapter.license")
        self.message = message
        self._emitted = False

    @property
    def emitted(self) -> bool:
        return self._emitted

    def emit(self) -> None:
        if not self.enabled or self._emitted:
            return
        self.logger.warning(self.message)
        self._emitted = True
