"""
Logging setup for the application.

Every module owns a logger via logging.getLogger(__name__);
this configures the root handler once at startup.
"""

import logging
from typing import Optional

from redirect_app.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging from settings (or an explicit level)."""
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format=LOG_FORMAT,
    )
