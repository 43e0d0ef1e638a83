from __future__ import annotations

import json
import logging
import os
from collections.abc import Mapping
from datetime import UTC, datetime
from typing import Any

from splunk_hec.constants import ENV_LOG_FORMAT

REDACTED = "[REDACTED]"

_SENSITIVE_KEYS = ("authorization", "password", "secret", "token")

# Attributes every LogRecord carries; anything else came in through ``extra=``.
_RECORD_ATTRS = frozenset(logging.makeLogRecord({}).__dict__) | {"message", "asctime"}

# httpx logs each request at INFO.
_QUIET_LOGGERS = ("httpx", "httpcore")


def _is_sensitive(key: str) -> bool:
    lowered = key.lower()
    return any(secret in lowered for secret in _SENSITIVE_KEYS)


def redact(value: Any) -> Any:
    """Return ``value`` with secrets masked in nested mappings, e.g. request headers."""
    if isinstance(value, Mapping):
        return {key: REDACTED if _is_sensitive(str(key)) else redact(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [redact(item) for item in value]
    return value


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        extras = {key: value for key, value in record.__dict__.items() if key not in _RECORD_ATTRS}
        payload.update(redact(extras))
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=True, separators=(",", ":"), default=str)


def configure_logging(verbose: bool = False) -> None:
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)

    handler = logging.StreamHandler()
    if os.getenv(ENV_LOG_FORMAT, "json").lower() == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s"))

    root.setLevel(logging.DEBUG if verbose else logging.INFO)
    root.addHandler(handler)
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
