"""Files of the ``app_logging`` helper package generated under ``src/``.

The package configures the standard library :mod:`logging` module from
``config07.json``: colored console output, errors on stderr and a JSON lines
file under ``logs/``. None of these files take parameters.
"""

from __future__ import annotations

__all__ = [
    "APP_LOGGING_FILES",
    "app_logging_config07_json",
    "app_logging_constants_py",
    "app_logging_glogger_py",
    "app_logging_my_colored_formatter_py",
    "app_logging_my_custom_json_class01_py",
    "app_logging_my_filters_py",
]


MY_COLORED_FORMATTER_PY = r'''import logging

from app_logging.constants import LEVEL_COLORS, RESET


class MyColoredFormatter(logging.Formatter):
    """Formatter that paints the level name with an ANSI color."""

    def __init__(self, fmt=None, datefmt=None, style="%", use_colors=True):
        super().__init__(fmt=fmt, datefmt=datefmt, style=style)
        self.use_colors = use_colors

    def format(self, record: logging.LogRecord) -> str:
        levelname = record.levelname
        if self.use_colors and levelname in LEVEL_COLORS:
            record.levelname = f"{LEVEL_COLORS[levelname]}{levelname}{RESET}"
        try:
            return super().format(record)
        finally:
            record.levelname = levelname
'''

CONFIG07_JSON = r'''{
  "version": 1,
  "disable_existing_loggers": false,
  "formatters": {
    "colored": {
      "()": "app_logging.MyColoredFormatter.MyColoredFormatter",
      "fmt": "%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s",
      "datefmt": "%Y-%m-%d %H:%M:%S"
    },
    "json": {
      "()": "app_logging.myCustomJsonClass01.MyJSONFormatter",
      "fmt_keys": {
        "level": "levelname",
        "message": "message",
        "timestamp": "timestamp",
        "logger": "name",
        "module": "module",
        "function": "funcName",
        "line": "lineno",
        "thread_name": "threadName"
      }
    }
  },
  "filters": {
    "below_warning": {
      "()": "app_logging.myFilters.NonErrorFilter"
    }
  },
  "handlers": {
    "stdout": {
      "class": "logging.StreamHandler",
      "level": "DEBUG",
      "formatter": "colored",
      "filters": ["below_warning"],
      "stream": "ext://sys.stdout"
    },
    "stderr": {
      "class": "logging.StreamHandler",
      "level": "WARNING",
      "formatter": "colored",
      "stream": "ext://sys.stderr"
    },
    "file_json": {
      "class": "logging.handlers.RotatingFileHandler",
      "level": "DEBUG",
      "formatter": "json",
      "filename": "logs/app.log.jsonl",
      "maxBytes": 1000000,
      "backupCount": 3,
      "encoding": "utf-8"
    }
  },
  "loggers": {
    "root": {
      "level": "DEBUG",
      "handlers": ["stdout", "stderr", "file_json"]
    }
  }
}
'''

CONSTANTS_PY = r'''from pathlib import Path

PACKAGE_DIR = Path(__file__).resolve().parent
PROJECT_ROOT = PACKAGE_DIR.parent.parent

CONFIG_FILE = PACKAGE_DIR / "config07.json"
LOG_DIR = PROJECT_ROOT / "logs"
LOG_FILE_HANDLER = "file_json"

DEFAULT_LOGGER_NAME = "app"

RESET = "\033[0m"
LEVEL_COLORS = {
    "DEBUG": "\033[36m",
    "INFO": "\033[32m",
    "WARNING": "\033[33m",
    "ERROR": "\033[31m",
    "CRITICAL": "\033[1;41m",
}

LOG_RECORD_BUILTIN_ATTRS = {
    "args",
    "asctime",
    "created",
    "exc_info",
    "exc_text",
    "filename",
    "funcName",
    "levelname",
    "levelno",
    "lineno",
    "module",
    "msecs",
    "message",
    "msg",
    "name",
    "pathname",
    "process",
    "processName",
    "relativeCreated",
    "stack_info",
    "taskName",
    "thread",
    "threadName",
}
'''

GLOGGER_PY = r'''import json
import logging
import logging.config

from app_logging.constants import CONFIG_FILE, DEFAULT_LOGGER_NAME, LOG_DIR, LOG_FILE_HANDLER

_configured = False


def setup_logging(config_file=CONFIG_FILE) -> None:
    """Configure the logging module from the JSON dictConfig file."""
    global _configured
    with open(config_file, encoding="utf-8") as handle:
        config = json.load(handle)

    handler = config.get("handlers", {}).get(LOG_FILE_HANDLER)
    if handler is not None:
        LOG_DIR.mkdir(parents=True, exist_ok=True)
        handler["filename"] = str(LOG_DIR / handler["filename"].split("/")[-1])

    logging.config.dictConfig(config)
    _configured = True


def get_logger(name: str = DEFAULT_LOGGER_NAME) -> logging.Logger:
    """Return a named logger, configuring logging on first use."""
    if not _configured:
        setup_logging()
    return logging.getLogger(name)


if __name__ == "__main__":
    log = get_logger(__name__)
    log.debug("debug message")
    log.info("info message")
    log.warning("warning message")
    log.error("error message")
    try:
        1 / 0
    except ZeroDivisionError:
        log.exception("exception message")
'''

MY_CUSTOM_JSON_CLASS01_PY = r'''import datetime as dt
import json
import logging
from pathlib import Path

from app_logging.constants import LOG_RECORD_BUILTIN_ATTRS


class MyJsonEncoder(json.JSONEncoder):
    """JSON encoder that also handles dates, paths and sets."""

    def default(self, o):
        if isinstance(o, (dt.datetime, dt.date)):
            return o.isoformat()
        if isinstance(o, Path):
            return str(o)
        if isinstance(o, (set, frozenset)):
            return sorted(o, key=str)
        return str(o)


class MyJSONFormatter(logging.Formatter):
    """Render each record as a single JSON object."""

    def __init__(self, *, fmt_keys=None):
        super().__init__()
        self.fmt_keys = fmt_keys if fmt_keys is not None else {}

    def format(self, record: logging.LogRecord) -> str:
        message = self._prepare_log_dict(record)
        return json.dumps(message, cls=MyJsonEncoder)

    def _prepare_log_dict(self, record: logging.LogRecord) -> dict:
        always_fields = {
            "message": record.getMessage(),
            "timestamp": dt.datetime.fromtimestamp(record.created, tz=dt.timezone.utc).isoformat(),
        }
        if record.exc_info is not None:
            always_fields["exc_info"] = self.formatException(record.exc_info)
        if record.stack_info is not None:
            always_fields["stack_info"] = self.formatStack(record.stack_info)

        message = {
            key: msg_val
            if (msg_val := always_fields.pop(val, None)) is not None
            else getattr(record, val)
            for key, val in self.fmt_keys.items()
        }
        message.update(always_fields)

        for key, val in record.__dict__.items():
            if key not in LOG_RECORD_BUILTIN_ATTRS:
                message[key] = val

        return message
'''

MY_FILTERS_PY = r'''import logging


class NonErrorFilter(logging.Filter):
    """Let through records below WARNING."""

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < logging.WARNING


class LevelRangeFilter(logging.Filter):
    """Let through records whose level lies in ``[low, high]``."""

    def __init__(self, low=logging.DEBUG, high=logging.CRITICAL, name=""):
        super().__init__(name)
        self.low = low
        self.high = high

    def filter(self, record: logging.LogRecord) -> bool:
        return self.low <= record.levelno <= self.high
'''


def app_logging_my_colored_formatter_py() -> str:
    return MY_COLORED_FORMATTER_PY


def app_logging_config07_json() -> str:
    return CONFIG07_JSON


def app_logging_constants_py() -> str:
    return CONSTANTS_PY


def app_logging_glogger_py() -> str:
    return GLOGGER_PY


def app_logging_my_custom_json_class01_py() -> str:
    return MY_CUSTOM_JSON_CLASS01_PY


def app_logging_my_filters_py() -> str:
    return MY_FILTERS_PY


# File name inside ``src/app_logging`` -> content factory, in write order.
APP_LOGGING_FILES = (
    ("__init__.py", lambda: ""),
    ("MyColoredFormatter.py", app_logging_my_colored_formatter_py),
    ("config07.json", app_logging_config07_json),
    ("constants.py", app_logging_constants_py),
    ("glogger.py", app_logging_glogger_py),
    ("myCustomJsonClass01.py", app_logging_my_custom_json_class01_py),
    ("myFilters.py", app_logging_my_filters_py),
)
