"""
Runtime settings read from the environment, and logging setup.
"""

import logging
import os
from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional


class OutputFormat(str, Enum):
    """Supported report output formats."""
    TEXT = "text"
    JSON = "json"


LOGGER_NAME = "elimination"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_HTTP_TIMEOUT = 30.0
DEFAULT_OUTPUT_FORMAT = OutputFormat.TEXT


@dataclass(frozen=True)
class Settings:
    """Settings for the command line driver and sources."""

    log_level: str = DEFAULT_LOG_LEVEL
    http_timeout: float = DEFAULT_HTTP_TIMEOUT
    output_format: OutputFormat = DEFAULT_OUTPUT_FORMAT

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """
        Build settings from environment variables.

        ELIMINATION_LOG_LEVEL: logging level name (default WARNING)
        ELIMINATION_HTTP_TIMEOUT: HTTP timeout in seconds (default 30)
        ELIMINATION_OUTPUT_FORMAT: 'text' or 'json' (default text)

        Raises:
            ValueError: If a variable holds an invalid value
        """
        env = os.environ if environ is None else environ

        log_level = env.get("ELIMINATION_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
        if not isinstance(logging.getLevelName(log_level), int):
            raise ValueError(f"Invalid ELIMINATION_LOG_LEVEL: {log_level}")

        raw_timeout = env.get("ELIMINATION_HTTP_TIMEOUT", str(DEFAULT_HTTP_TIMEOUT))
        try:
            http_timeout = float(raw_timeout)
        except ValueError:
            raise ValueError(f"Invalid ELIMINATION_HTTP_TIMEOUT: {raw_timeout}")
        if http_timeout <= 0:
            raise ValueError("ELIMINATION_HTTP_TIMEOUT must be positive")

        raw_format = env.get("ELIMINATION_OUTPUT_FORMAT", DEFAULT_OUTPUT_FORMAT.value)
        try:
            output_format = OutputFormat(raw_format.lower())
        except ValueError:
            raise ValueError(f"Invalid ELIMINATION_OUTPUT_FORMAT: {raw_format}")

        return cls(
            log_level=log_level,
            http_timeout=http_timeout,
            output_format=output_format
        )


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    """Send the package's log records to stderr at the given level."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level.upper())
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
