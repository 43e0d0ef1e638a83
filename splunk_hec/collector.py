from __future__ import annotations

import logging
from collections.abc import Mapping

import httpx
from pydantic import ValidationError

from splunk_hec.config import CollectorConfig
from splunk_hec.constants import AUTH_SCHEME, SUCCESS_STATUS
from splunk_hec.errors import RemoteRejection, SerializationError, TransportError
from splunk_hec.schemas import Event, epoch_seconds, resolve_hostname
from splunk_hec.serialization import event_json_bytes

logger = logging.getLogger("splunk_hec.collector")


class HTTPCollector:
    """Sends one event to a Splunk HTTP Event Collector per ``log`` call.

    The collector keeps no state between calls, so a single instance can be
    shared across threads.
    """

    def __init__(self, config: CollectorConfig, *, transport: httpx.BaseTransport | None = None) -> None:
        self.config = config
        self._transport = transport

    def headers(self) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Authorization": f"{AUTH_SCHEME} {self.config.token}",
        }

    def build_event(self, fields: Mapping[str, str] | None = None) -> Event:
        try:
            return Event(
                time=epoch_seconds(),
                host=resolve_hostname(),
                source=self.config.source,
                sourcetype=self.config.sourcetype,
                index=self.config.index,
                event=dict(fields or {}),
            )
        except (ValidationError, TypeError, ValueError) as exc:
            raise SerializationError(str(exc)) from exc

    def log(self, fields: Mapping[str, str] | None = None) -> None:
        """Send ``fields`` as a single event.

        Raises SerializationError before any I/O if the event cannot be
        encoded, TransportError if the request fails, and RemoteRejection
        with the response body as its message for any status other than 200.
        """
        body = event_json_bytes(self.build_event(fields))
        context = {"hec_url": self.config.url, "hec_index": self.config.index, "hec_bytes": len(body)}
        headers = self.headers()

        try:
            with httpx.Client(
                verify=self.config.tls_verify,
                timeout=self.config.timeout_seconds,
                transport=self._transport,
            ) as client:
                response = client.post(self.config.url, content=body, headers=headers)
        except (httpx.HTTPError, httpx.InvalidURL, UnicodeEncodeError) as exc:
            # httpx encodes header values as ascii; a non-ascii token fails here.
            logger.debug("event post failed: %s", exc, extra={**context, "headers": headers})
            raise TransportError(str(exc)) from exc

        logger.debug(
            "event posted status=%s",
            response.status_code,
            extra={**context, "hec_status": response.status_code, "headers": headers},
        )
        if response.status_code != SUCCESS_STATUS:
            raise RemoteRejection(response.status_code, response.text)
