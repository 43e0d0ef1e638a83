from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    SERIALIZATION = "serialization"
    TRANSPORT = "transport"
    REMOTE_REJECTION = "remote_rejection"


class CollectorError(Exception):
    """Raised when a log event could not be delivered.

    ``str(err)`` is the raw diagnostic text: the transport's message or the
    collector's response body.
    """

    kind: ErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class SerializationError(CollectorError):
    kind = ErrorKind.SERIALIZATION


class TransportError(CollectorError):
    kind = ErrorKind.TRANSPORT


class RemoteRejection(CollectorError):
    kind = ErrorKind.REMOTE_REJECTION

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(body)
        self.status_code = status_code
        self.body = body
