from __future__ import annotations

from typing import Optional


class RemoteEnhancerError(Exception):
    """Base exception for remote enhancer failures."""

    def __init__(self, message: str, provider: str = "unknown", original_error: Optional[Exception] = None):
        super().__init__(message)
        self.provider = provider
        self.original_error = original_error


class EnhancerDisabledError(RemoteEnhancerError):
    """Raised when enhancer calls are disabled via kill switch."""


class EnhancerMisconfiguredError(RemoteEnhancerError):
    """Raised when enhancer configuration is missing or invalid."""


class EnhancerTimeoutError(RemoteEnhancerError):
    """Raised when the enhancer call times out."""


class EnhancerCircuitOpenError(RemoteEnhancerError):
    """Raised when circuit breaker is open."""

    def __init__(self, retry_after: int | None = None, provider: str = "unknown") -> None:
        super().__init__("circuit open", provider=provider)
        self.retry_after = retry_after


class EnhancerUpstreamError(RemoteEnhancerError):
    """Raised for upstream provider failures."""


__all__ = [
    "RemoteEnhancerError",
    "EnhancerDisabledError",
    "EnhancerMisconfiguredError",
    "EnhancerTimeoutError",
    "EnhancerCircuitOpenError",
    "EnhancerUpstreamError",
]
