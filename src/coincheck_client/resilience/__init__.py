"""Error taxonomy and structured logging for exchange API calls."""

from .errors import (
    InvariantViolation,
    ProviderError,
    MissingCredentialsError,
    ValidationProviderError,
    TransientProviderError,
    ApiProviderError,
    RateLimitProviderError,
    AuthProviderError,
    ProtocolProviderError,
    DecodeProviderError,
)
from .log import close_event_sinks, log_event, log_provider_error

__all__ = [
    "InvariantViolation",
    "ProviderError",
    "MissingCredentialsError",
    "ValidationProviderError",
    "TransientProviderError",
    "ApiProviderError",
    "RateLimitProviderError",
    "AuthProviderError",
    "ProtocolProviderError",
    "DecodeProviderError",
    "close_event_sinks",
    "log_event",
    "log_provider_error",
]
