"""
Logging setup shared by the command-line entry points.

The level and format come from the LOG_LEVEL and LOG_FORMAT environment
variables unless a level is passed explicitly.
"""

import logging
import os
from typing import Optional


def configure_logging(default_level: str = "WARNING", level: Optional[str] = None) -> None:
    """Configure root logging from environment.

    Respects LOG_LEVEL and LOG_FORMAT. An explicit level wins over
    LOG_LEVEL. If already configured, does nothing.
    """
    if logging.getLogger().handlers:
        return

    level_name = (level or os.getenv("LOG_LEVEL", default_level)).upper()
    resolved = getattr(logging, level_name, logging.WARNING)

    log_format = os.getenv(
        "LOG_FORMAT",
        "%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.basicConfig(level=resolved, format=log_format)
