"""Logging for smugwrap.

Usage:
    from smugwrap.core.logging import logger

    dispatch_logger = logger.with_context(legacy_method="albums_getInfo")
    dispatch_logger.debug("Sending signed request")

The library never installs handlers on import. Applications that want the
library's output call ``configure_logging()`` once at startup.
"""

import logging
from typing import Any, MutableMapping, Optional

LOGGER_NAME = "smugwrap"

DEFAULT_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


class ContextualLogger(logging.LoggerAdapter):
    """Logger adapter that carries contextual dimensions and a message prefix.

    Dimensions are attached to every record via ``extra`` and rendered as a
    trailing ``key=value`` list so they survive plain-text formatters.
    """

    def __init__(
        self,
        logger: logging.Logger,
        dimensions: Optional[dict[str, Any]] = None,
        prefix: str = "",
    ) -> None:
        """Wrap ``logger`` with the given dimensions and prefix."""
        super().__init__(logger, dict(dimensions or {}))
        self.dimensions: dict[str, Any] = dict(dimensions or {})
        self.prefix = prefix

    def with_context(self, **dimensions: Any) -> "ContextualLogger":
        """Return a new logger with ``dimensions`` merged into the current ones."""
        return ContextualLogger(self.logger, {**self.dimensions, **dimensions}, self.prefix)

    def with_prefix(self, prefix: str) -> "ContextualLogger":
        """Return a new logger that prepends ``prefix`` to every message."""
        return ContextualLogger(self.logger, self.dimensions, prefix)

    def process(self, msg: Any, kwargs: MutableMapping[str, Any]) -> tuple[Any, Any]:
        """Attach prefix and dimensions to the record."""
        extra = {**self.dimensions, **kwargs.get("extra", {})}
        kwargs["extra"] = extra
        if self.dimensions:
            rendered = " ".join(f"{k}={v}" for k, v in self.dimensions.items())
            msg = f"{self.prefix}{msg} [{rendered}]"
        else:
            msg = f"{self.prefix}{msg}"
        return msg, kwargs


def validate_log_level(level: str) -> str:
    """Return ``level`` upper-cased.

    Raises:
        ValueError: If the level is not a known log level.
    """
    level_upper = level.strip().upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Invalid log level: {level}. Valid: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )
    return level_upper


def set_log_level(level: str) -> None:
    """Set the level of the smugwrap logger without touching its handlers.

    Raises:
        ValueError: If the level is not a known log level.
    """
    logging.getLogger(LOGGER_NAME).setLevel(validate_log_level(level))


def configure_logging(level: str = "INFO", fmt: str = DEFAULT_FORMAT) -> None:
    """Install a stream handler on the smugwrap logger.

    Args:
        level: One of DEBUG, INFO, WARNING, ERROR, CRITICAL.
        fmt: Format string for the handler.

    Raises:
        ValueError: If the level is not a known log level.
    """
    level_upper = validate_log_level(level)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt))

    base = logging.getLogger(LOGGER_NAME)
    base.setLevel(level_upper)
    # Replace handlers so repeated calls don't duplicate output
    base.handlers = [handler]


logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())

logger = ContextualLogger(logging.getLogger(LOGGER_NAME))
