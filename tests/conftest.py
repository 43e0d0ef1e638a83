from __future__ import annotations

import threading
from collections.abc import Callable

import httpx
import pytest

from splunk_hec.config import CollectorConfig

TEST_TOKEN = "11111111-2222-3333-4444-555555555555"


class RecordingTransport(httpx.MockTransport):
    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.requests: list[httpx.Request] = []
        self._lock = threading.Lock()

        def _record(request: httpx.Request) -> httpx.Response:
            with self._lock:
                self.requests.append(request)
            return handler(request)

        super().__init__(_record)


@pytest.fixture()
def collector_config() -> CollectorConfig:
    return CollectorConfig(
        url="https://hec.example.test:8088/services/collector/event",
        token=TEST_TOKEN,
        source="billing-api",
        sourcetype="_json",
        index="app_events",
    )


@pytest.fixture()
def respond() -> Callable[..., RecordingTransport]:
    def _factory(status_code: int = 200, text: str = '{"text":"Success","code":0}') -> RecordingTransport:
        return RecordingTransport(lambda request: httpx.Response(status_code, text=text))

    return _factory


@pytest.fixture()
def recording_transport() -> type[RecordingTransport]:
    return RecordingTransport
