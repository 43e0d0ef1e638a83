from __future__ import annotations

import json
from typing import Any

from splunk_hec.errors import SerializationError
from splunk_hec.schemas import Event


def event_payload(event: Event) -> dict[str, Any]:
    return event.model_dump(mode="json")


def event_json_bytes(event: Event) -> bytes:
    # Lone surrogates survive validation and only fail at the utf-8 step.
    try:
        encoded = json.dumps(event_payload(event), separators=(",", ":"), ensure_ascii=False)
        return encoded.encode("utf-8")
    except (TypeError, ValueError) as exc:
        raise SerializationError(str(exc)) from exc
