"""Structured logging configuration using structlog.

JSON lines in production, colorized console output everywhere else.
Repository owners and full names are PII: a skill profile must not be
traceable to an account through the logs.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from app.config import Environment, Settings, get_settings

# Matched as substrings of the key. Evidence tokens are not secrets.
SENSITIVE_KEYS = frozenset({"api_key", "password", "secret", "authorization", "cookie", "email"})

# Matched exactly
PII_KEYS = frozenset({"username", "owner", "github_username", "full_name", "user_email"})

SCORE_PRECISION = 4


def _filter_sensitive_data(
    _logger: Any, _method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Remove sensitive fields from log events."""
    for key in list(event_dict.keys()):
        if any(s in key.lower() for s in SENSITIVE_KEYS):
            event_dict[key] = "[REDACTED]"
    return event_dict


def _filter_pii(
    _logger: Any, _method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Redact repository owners and account names."""
    for key in PII_KEYS.intersection(event_dict):
        event_dict[key] = "[PII_REDACTED]"
    return event_dict


def _round_scores(
    _logger: Any, _method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Round float fields so confidences read the same across runs."""
    for key, value in event_dict.items():
        if isinstance(value, float):
            event_dict[key] = round(value, SCORE_PRECISION)
    return event_dict


def _renderer(settings: Settings) -> structlog.types.Processor:
    if settings.environment == Environment.PRODUCTION:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=not settings.is_testing)


def setup_logging(settings: Settings | None = None) -> None:
    """Route structlog through the stdlib root logger."""
    settings = settings or get_settings()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            _filter_sensitive_data,
            _filter_pii,
            _round_scores,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(settings),
            ],
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, settings.log_level.upper(), logging.INFO))


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(name)
