"""Logging utilities for the dashboard.

Everything goes to stdout, where ``streamlit run`` shows it. Nothing is
written to disk; edits and logs alike end with the session.
"""

import logging
import sys
from typing import Optional

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str = "INFO", format_string: Optional[str] = None) -> None:
    """Configure the root logger.

    Streamlit reruns the app script on every interaction, so this is called
    repeatedly; ``force=True`` replaces the previous handler instead of
    stacking another one.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_string: Custom format string for log messages
    """
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format=format_string or DEFAULT_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )


def get_logger(name: str) -> logging.Logger:
    """Return a logger, configuring stdout logging first if nothing has yet."""
    if not logging.getLogger().handlers:
        setup_logging()

    return logging.getLogger(name)


dashboard_logger = get_logger("dashboard")
