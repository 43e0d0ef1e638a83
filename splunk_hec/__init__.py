"""Minimal client for the Splunk HTTP Event Collector."""

from splunk_hec.collector import HTTPCollector
from splunk_hec.config import CollectorConfig
from splunk_hec.errors import CollectorError, ErrorKind, RemoteRejection, SerializationError, TransportError
from splunk_hec.schemas import Event

__all__ = [
    "HTTPCollector",
    "CollectorConfig",
    "Event",
    "CollectorError",
    "ErrorKind",
    "SerializationError",
    "TransportError",
    "RemoteRejection",
]
