"""Exceptions raised by Beacon components."""

from enum import StrEnum


class ErrorCategory(StrEnum):
    """Coarse failure category exposed to callers."""

    TIMEOUT = "timeout"
    TRANSPORT = "transport"
    UNEXPECTED = "unexpected"


class BeaconError(Exception):
    """Base class for failures that abort an analysis request."""

    category: ErrorCategory = ErrorCategory.UNEXPECTED


class ModelParseError(BeaconError):
    """Model output held no decodable JSON payload of the expected shape."""


class UpstreamTransportError(BeaconError):
    """A call to the model or the claim registry failed at the network layer.

    Args:
        service: Name of the external service that failed.
        message: Human-readable description (for logs only).
        category: ``TIMEOUT`` or ``TRANSPORT``.
    """

    def __init__(
        self,
        service: str,
        message: str,
        *,
        category: ErrorCategory = ErrorCategory.TRANSPORT,
    ) -> None:
        super().__init__(f"{service}: {message}")
        self.service = service
        self.category = category
