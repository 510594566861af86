"""Logging service."""

import logging
import sys

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging for scripts."""
    logging.basicConfig(
        level=level.upper(),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
    )
    logging.getLogger("wizard_extreme").setLevel(level.upper())


class LogService:
    """Service for structured logging.

    Writes key=value lines so match progress is easy to grep.
    """

    def info(self, data: dict[str, object]) -> None:
        """Log info message.

        Args:
            data: Log data as key-value pairs

        """
        logger.info(self._format(data))

    def warning(self, data: dict[str, object]) -> None:
        """Log warning message."""
        logger.warning(self._format(data))

    def debug(self, data: dict[str, object]) -> None:
        """Log debug message."""
        logger.debug(self._format(data))

    @staticmethod
    def _format(data: dict[str, object]) -> str:
        return " | ".join(f"{k}={v}" for k, v in data.items())
