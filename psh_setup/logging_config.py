import copy
import json
import logging
import logging.config
from typing import Any, Dict


# Attributes present on every LogRecord; anything else came in through `extra=`
_RESERVED_ATTRS = frozenset(
    logging.LogRecord("", logging.INFO, "", 0, "", (), None).__dict__
) | {"message", "asctime"}


class StructuredFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)

        extra = {
            key: value
            for key, value in record.__dict__.items()
            if key not in _RESERVED_ATTRS
        }
        if extra:
            try:
                extra_formatted = json.dumps(extra, default=str, sort_keys=True)
            except ValueError:
                extra_formatted = str(extra)
            return f"{message} - extra: {extra_formatted}"
        return message


DEFAULT_LOGGING_CONFIG: Dict[str, Any] = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "standard": {
            "()": StructuredFormatter,
            "format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
    },
    "handlers": {
        # stdout belongs to the prompts
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "standard",
            "stream": "ext://sys.stderr",
        },
    },
    "loggers": {
        "psh_setup": {
            "handlers": ["console"],
            "level": "WARNING",
            "propagate": False,
        },
    },
}


def setup_logging(level: str = "WARNING") -> None:
    """Configure logging for the setup utility.

    Args:
        level: The logging level to use (e.g., "DEBUG", "INFO", "WARNING").
            Defaults to "WARNING" so an interactive run only shows prompts.
    """
    config = copy.deepcopy(DEFAULT_LOGGING_CONFIG)
    config["loggers"]["psh_setup"]["level"] = level
    logging.config.dictConfig(config)
