import logging
from logging.handlers import RotatingFileHandler
import sys
from pathlib import Path
from contextvars import ContextVar
from typing import Any, Mapping, Optional

from scaffold_api.config.settings import get_logging_config

NO_CORRELATION_ID = "NO Correlation ID"

# Context variable to store correlation ID across async/thread boundaries
correlation_id_var: ContextVar[str] = ContextVar(
    "correlation_id", default=NO_CORRELATION_ID
)

# Any key containing one of these (case-insensitive) is redacted
SENSITIVE_KEYS = (
    "password",
    "currentpassword",
    "newpassword",
    "token",
    "accesstoken",
    "refreshtoken",
    "secret",
    "apikey",
)
REDACTED = "[REDACTED]"

# Level names used by other logging stacks, mapped onto stdlib levels
_LEVEL_ALIASES = {"WARN": "WARNING", "FATAL": "CRITICAL", "TRACE": "DEBUG"}

# Attributes every LogRecord carries; anything else arrived through `extra`
_RECORD_ATTRS = frozenset(
    logging.LogRecord("", 0, "", 0, "", (), None).__dict__.keys()
) | {"message", "asctime", "correlation_id"}


def _is_sensitive(key: str) -> bool:
    lowered = key.lower().replace("_", "").replace("-", "")
    return any(sensitive in lowered for sensitive in SENSITIVE_KEYS)


def redact(value: Any, _seen: Optional[set] = None) -> Any:
    """Return a copy of value with sensitive mapping keys replaced by [REDACTED]."""
    seen = _seen if _seen is not None else set()
    if isinstance(value, Mapping):
        if id(value) in seen:
            return {}
        seen.add(id(value))
        result = {
            k: REDACTED if isinstance(k, str) and _is_sensitive(k) else redact(v, seen)
            for k, v in value.items()
        }
        seen.discard(id(value))
        return result
    if isinstance(value, (list, tuple)):
        return type(value)(redact(item, seen) for item in value)
    return value


def resolve_level(level: str) -> int:
    name = (level or "").upper()
    name = _LEVEL_ALIASES.get(name, name)
    resolved = logging.getLevelName(name)
    return resolved if isinstance(resolved, int) else logging.INFO


class CorrelationIdFilter(logging.Filter):
    """Logging filter to add correlation ID to log records."""

    def filter(self, record):
        record.correlation_id = correlation_id_var.get()
        return True


class RedactingFilter(logging.Filter):
    """Strips sensitive values from mapping args and `extra` payloads."""

    def filter(self, record):
        if isinstance(record.args, Mapping):
            record.args = redact(record.args)
        for key in list(record.__dict__):
            if key in _RECORD_ATTRS:
                continue
            if _is_sensitive(key):
                record.__dict__[key] = REDACTED
            else:
                record.__dict__[key] = redact(record.__dict__[key])
        return True


class SafeFormatter(logging.Formatter):
    """Formatter that ensures correlation_id always exists."""

    def format(self, record):
        if not hasattr(record, "correlation_id"):
            record.correlation_id = NO_CORRELATION_ID
        return super().format(record)


def _make_handler(handler: logging.Handler, formatter: logging.Formatter) -> logging.Handler:
    handler.setFormatter(formatter)
    handler.addFilter(CorrelationIdFilter())
    handler.addFilter(RedactingFilter())
    handler._scaffold_api = True  # marks handlers owned by setup_logging
    return handler


def setup_logging(level: str = "info", log_dir: str | None = None):
    """
    Configure the root logger: console output plus, when log_dir is given,
    rotating app.log and app-error.log files.

    Safe to call more than once; handlers from a previous call are replaced.
    """
    config = get_logging_config()
    root = logging.getLogger()
    root.setLevel(logging.WARNING)  # Set root to WARNING to avoid too much noise
    for existing in [h for h in root.handlers if getattr(h, "_scaffold_api", False)]:
        root.removeHandler(existing)
        existing.close()

    formatter = SafeFormatter(config.log_format)
    root.addHandler(_make_handler(logging.StreamHandler(sys.stdout), formatter))

    # Set up file logging with rotation; errors also go to their own file
    if log_dir:
        Path(log_dir).mkdir(parents=True, exist_ok=True)
        root.addHandler(
            _make_handler(
                RotatingFileHandler(
                    Path(log_dir) / "app.log",
                    maxBytes=config.max_bytes,
                    backupCount=config.backup_count,
                    encoding="utf-8",
                ),
                formatter,
            )
        )
        error_handler = _make_handler(
            RotatingFileHandler(
                Path(log_dir) / "app-error.log",
                maxBytes=config.max_bytes,
                backupCount=config.backup_count,
                encoding="utf-8",
            ),
            formatter,
        )
        error_handler.setLevel(logging.ERROR)
        root.addHandler(error_handler)

    # Only our own package logs at the configured level
    logging.getLogger("scaffold_api").setLevel(resolve_level(level))
    logging.getLogger("scaffold_api").info("Logging is set up.")

    return root
