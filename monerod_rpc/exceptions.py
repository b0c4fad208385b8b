"""Public exceptions for the monerod RPC client."""

from typing import Any


class MonerodError(Exception):
    """Base exception for all monerod RPC client errors."""


class MonerodConfigError(MonerodError):
    """Configuration error (missing env vars, invalid config)."""


class MonerodValidationError(MonerodError):
    """Caller-supplied argument failed a pre-flight shape check."""


class MonerodSerializationError(MonerodError):
    """Request parameters could not be converted to JSON."""


class MonerodTransportError(MonerodError):
    """Network-level failure talking to the daemon."""

    def __init__(
        self,
        message: str,
        *,
        cause: BaseException | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.cause = cause
        self.status_code = status_code


class MonerodDecodeError(MonerodError):
    """Response body is not valid JSON."""

    def __init__(self, message: str, body: Any = None) -> None:
        super().__init__(message)
        self.body = body
