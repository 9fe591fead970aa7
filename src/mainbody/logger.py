"""Logging configuration for mainbody."""

import logging
import sys

from mainbody.config import settings

# Single app logger that can be imported throughout the package
logger = logging.getLogger("mainbody")


def setup_logging() -> None:
    """Configure application logging.

    Logs to stderr. Sets up a single app logger (mainbody) that can be
    controlled via MAINBODY_DEBUG. Called by the tool server on import.
    """
    # Clear existing handlers to prevent duplicate log entries on reload
    logging.root.handlers = []

    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    app_log_level = logging.DEBUG if settings.mainbody_debug else logging.INFO
    logger.setLevel(app_log_level)

    level_name = "DEBUG" if settings.mainbody_debug else "INFO"
    logger.info("Mainbody logging initialized at %s level", level_name)
