"""Logging setup for applications embedding the form validators.

Nothing in this package configures logging on import. Applications that embed
the validators call ``configure_logging`` once at startup.
"""

import logging

from .settings import Settings, settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(config: Settings = settings) -> None:
    """Configure the root logger from settings.

    Only sets up a handler when the root logger has none, so applications
    that already configured logging keep their handlers and only get the level.
    """
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(format=LOG_FORMAT)
    root.setLevel(config.log_level)
    logging.getLogger(__name__).debug(f"Logging configured at {config.log_level} level")
