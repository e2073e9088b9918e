"""Runtime settings for the customer database.

Values are read from the environment (or a ``.env`` file) through
*python-decouple*.  Logging is structured with *structlog*; both structlog
loggers and stdlib ``logging`` records share one processor chain so every
line is rendered the same way.
"""

import logging.config
import re

import structlog
from decouple import config

APP_TITLE = config("APP_TITLE", default="Group 11's Customer Database")

LOG_LEVEL = config("LOG_LEVEL", default="WARNING").upper()

LOG_JSON = config("LOG_JSON", default=False, cast=bool)

# ---------------------------------------------------------------------------
# Structured Logging (structlog + stdlib LOGGING)
# ---------------------------------------------------------------------------
SENSITIVE_PATTERN = re.compile(
    r"([^\s@'\"]+@[^\s@'\"]+)"  # email
    r"|(\+?\d[\d\s().-]{5,}\d)",  # phone
)

# Identifiers that only look like phone numbers.
UNMASKED_KEYS = frozenset({"event", "session_id"})


def mask_sensitive_data(_, __, event_dict):
    """Processor that masks email addresses and phone numbers in log values."""
    for key, value in list(event_dict.items()):
        if key in UNMASKED_KEYS:
            continue
        if isinstance(value, str):
            event_dict[key] = SENSITIVE_PATTERN.sub("***MASKED***", value)
    return event_dict


# Masking runs before the timestamp is added so ISO dates are left alone.
_shared_processors = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    mask_sensitive_data,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.UnicodeDecoder(),
]


def _renderer():
    if LOG_JSON:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=False)


LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "structured": {
            "()": structlog.stdlib.ProcessorFormatter,
            "processors": [
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(),
            ],
            "foreign_pre_chain": _shared_processors,
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "stream": "ext://sys.stderr",
            "formatter": "structured",
        },
    },
    "root": {
        "handlers": ["console"],
        "level": LOG_LEVEL,
    },
}


def configure_logging() -> None:
    """Apply the structlog configuration and the stdlib ``LOGGING`` dict."""
    structlog.configure(
        processors=[
            *_shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.config.dictConfig(LOGGING)
