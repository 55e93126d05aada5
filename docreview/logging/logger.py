import logging
import sys

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(feature)s: %(message)s"
DEFAULT_FEATURE = "docreview"


class _FeatureFilter(logging.Filter):
    """Fills in ``feature`` for records logged outside a flow."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "feature"):
            record.feature = DEFAULT_FEATURE
        return True


class Log:
    """Centralized logging for the CLI and flows.

    Output goes to stderr so stdout stays reserved for rendered results.
    Pass ``feature=`` to tag a record with the flow that produced it.
    """

    _logger: logging.Logger = logging.getLogger("docreview")

    @classmethod
    def configure(cls, log_level: str) -> None:
        """Set the level and attach a single stderr handler."""
        cls._logger.setLevel(log_level.upper())
        if not cls._logger.handlers:
            handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
            handler.addFilter(_FeatureFilter())
            cls._logger.addHandler(handler)

    @classmethod
    def info(cls, message: str, **kwargs: object) -> None:
        cls._logger.info(message, extra=kwargs)

    @classmethod
    def error(cls, message: str, **kwargs: object) -> None:
        cls._logger.error(message, extra=kwargs)

    @classmethod
    def warning(cls, message: str, **kwargs: object) -> None:
        cls._logger.warning(message, extra=kwargs)

    @classmethod
    def debug(cls, message: str, **kwargs: object) -> None:
        cls._logger.debug(message, extra=kwargs)
