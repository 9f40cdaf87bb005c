"""Error classification for exchange API calls."""

from __future__ import annotations

from typing import Optional


class InvariantViolation(Exception):
    """Internal programming error (e.g. partial auth headers). Never a runtime condition."""


class ProviderError(Exception):
    """Base class for all provider-related errors."""

    def __init__(
        self,
        message: str,
        code: Optional[int] = None,
        field: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.field = field


class MissingCredentialsError(ProviderError):
    """Private endpoint called on a client without credentials."""


class ValidationProviderError(ProviderError):
    """Input rejected locally before any request was built."""


class TransientProviderError(ProviderError):
    """Temporary failures: timeouts, connection errors."""


class ApiProviderError(ProviderError):
    """The exchange rejected the request."""


class RateLimitProviderError(ApiProviderError):
    """HTTP 429 or rate limit exceeded."""


class AuthProviderError(ApiProviderError):
    """Authentication or permission errors (bad signature, stale nonce...)."""


class ProtocolProviderError(ProviderError):
    """Malformed or unexpected response shape."""


class DecodeProviderError(ProviderError):
    """Response did not match the expected model."""
