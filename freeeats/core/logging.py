"""
Logging setup.

Access events go through structlog; application modules log through the
standard library via ``get_logger``. Both carry the current request id and
caller id from context variables, and both render as JSON unless
LOG_FORMAT is "text".
"""

import logging
import logging.handlers
import sys
from contextvars import ContextVar
from pathlib import Path
from typing import Any, Dict, List, Optional

import structlog
from pythonjsonlogger import jsonlogger

from freeeats.config.settings import Settings, settings

SERVICE_NAME = "freeeats-api"

request_id: ContextVar[Optional[str]] = ContextVar('request_id', default=None)
user_id: ContextVar[Optional[str]] = ContextVar('user_id', default=None)

# Keys masked in structlog events
REDACTED_KEYS = ('token', 'secret', 'api_key', 'authorization', 'password', 'cookie')

_QUIET_LOGGERS = {
    "uvicorn.access": logging.WARNING,
    "urllib3": logging.WARNING,
    "httpx": logging.WARNING,
    "google_genai": logging.WARNING,
}


def _current_context() -> Dict[str, str]:
    context = {}
    if request_id.get():
        context['request_id'] = request_id.get()
    if user_id.get():
        context['user_id'] = user_id.get()
    return context


def add_request_context(logger, method_name, event_dict):
    """structlog processor: request/caller ids plus service metadata."""
    event_dict.update(_current_context())
    event_dict.setdefault('service', SERVICE_NAME)
    event_dict.setdefault('environment', settings.ENVIRONMENT)
    return event_dict


def redact_secrets(logger, method_name, event_dict):
    """structlog processor: mask values whose key looks like a credential."""
    _redact(event_dict)
    return event_dict


def _redact(values: Dict[str, Any]) -> None:
    for key, value in values.items():
        if any(marker in key.lower() for marker in REDACTED_KEYS):
            values[key] = '[REDACTED]'
        elif isinstance(value, dict):
            _redact(value)


class ContextJsonFormatter(jsonlogger.JsonFormatter):
    """JSON lines with level, logger name and source location."""

    def add_fields(self, log_record, record, message_dict):
        super().add_fields(log_record, record, message_dict)
        log_record['level'] = record.levelname
        log_record['logger'] = record.name
        log_record['location'] = f"{record.module}:{record.funcName}:{record.lineno}"


def _build_formatter(config: Settings) -> logging.Formatter:
    if config.LOG_FORMAT == "json":
        return ContextJsonFormatter('%(asctime)s %(name)s %(levelname)s %(message)s')
    return logging.Formatter('%(asctime)s %(levelname)-8s [%(name)s] %(message)s')


def configure_structlog(config: Settings) -> None:
    processors: List[Any] = [
        structlog.stdlib.filter_by_level,
        add_request_context,
        redact_secrets,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.format_exc_info,
    ]
    if config.LOG_FORMAT == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=True,
    )


def configure_stdlib_logging(config: Settings) -> None:
    level = getattr(logging, config.LOG_LEVEL, logging.INFO)
    formatter = _build_formatter(config)

    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if config.LOG_FILE:
        log_path = Path(config.LOG_FILE)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.handlers.RotatingFileHandler(
            log_path, maxBytes=10 * 1024 * 1024, backupCount=5
        ))

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        root.addHandler(handler)

    for name, quiet_level in _QUIET_LOGGERS.items():
        logging.getLogger(name).setLevel(quiet_level)
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if config.DATABASE_ECHO else logging.WARNING
    )


class LoggerAdapter(logging.LoggerAdapter):
    """Adds the current request and caller ids to every record's ``extra``."""

    def process(self, msg, kwargs):
        kwargs["extra"] = {**_current_context(), **(kwargs.get("extra") or {})}
        return msg, kwargs


def get_logger(name: Optional[str] = None) -> LoggerAdapter:
    return LoggerAdapter(logging.getLogger(name or 'freeeats'), {})


def get_struct_logger(name: str):
    return structlog.get_logger(name)


def setup_logging(config: Settings = settings) -> None:
    """Configure structlog and the root logger. Called by the app factory."""
    if config.ENABLE_STRUCTURED_LOGGING:
        configure_structlog(config)
    configure_stdlib_logging(config)

    get_logger(__name__).info(
        f"Logging initialized (level={config.LOG_LEVEL}, format={config.LOG_FORMAT})"
    )


__all__ = [
    'get_logger',
    'get_struct_logger',
    'setup_logging',
    'LoggerAdapter',
    'request_id',
    'user_id',
]
