"""Logging helpers with redaction."""

from __future__ import annotations

import logging
import re
from typing import Any, Dict, Mapping


_SENSITIVE_KEYS = re.compile(r"(token|secret|api[_-]?key|password|authorization)", re.IGNORECASE)

REDACTED = "***REDACTED***"

# Transport libraries that log every request line at INFO.
_QUIET_LOGGERS = ("httpx", "httpcore")


def configure_logging(level: str) -> None:
    level = level.upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    if level != "DEBUG":
        for name in _QUIET_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)


def _redact_value(value: Any) -> Any:
    if isinstance(value, Mapping):
        return redact_payload(value)
    if isinstance(value, (list, tuple)):
        return [_redact_value(item) for item in value]
    return value


def redact_payload(payload: Mapping[str, Any]) -> Dict[str, Any]:
    """Copy ``payload`` with credential-looking keys masked, recursing into containers."""
    return {
        key: REDACTED if _SENSITIVE_KEYS.search(str(key)) else _redact_value(value)
        for key, value in payload.items()
    }
