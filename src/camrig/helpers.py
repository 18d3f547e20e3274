"""Helper functions for applications embedding camrig."""

import logging

from rich.logging import RichHandler


def setup_logging(log_level: str = "DEBUG") -> None:
    """Configure logging so camrig's debug output is readable during development.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).

    Side effects:
        - Configures the root logger with RichHandler
        - Sets the specified log level

    Example:
        >>> from camrig.helpers import setup_logging
        >>> setup_logging("INFO")
    """
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(message)s",
        handlers=[RichHandler(rich_tracebacks=True, markup=True)],
    )
