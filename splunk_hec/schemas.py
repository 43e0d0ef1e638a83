from __future__ import annotations

import socket
import time

from pydantic import BaseModel, ConfigDict, Field


def epoch_seconds() -> int:
    return int(time.time())


def resolve_hostname() -> str:
    try:
        return socket.gethostname()
    except OSError:
        return ""


class Event(BaseModel):
    """One HEC event envelope. All six fields are always serialized."""

    model_config = ConfigDict(extra="forbid", frozen=True, strict=True)

    time: int = Field(default_factory=epoch_seconds)
    host: str = Field(default_factory=resolve_hostname)
    source: str
    sourcetype: str
    index: str
    event: dict[str, str] = Field(default_factory=dict)
