"""Typed outcome of every endpoint call."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, NoReturn, Optional, Type, TypeVar, Union

from coincheck_client.resilience.errors import (
    ApiProviderError,
    AuthProviderError,
    DecodeProviderError,
    MissingCredentialsError,
    ProtocolProviderError,
    ProviderError,
    RateLimitProviderError,
    TransientProviderError,
    ValidationProviderError,
)

T = TypeVar("T")


class ErrorKind(str, Enum):
    MISSING_CREDENTIALS = "missing_credentials"
    VALIDATION = "validation"
    TRANSPORT = "transport"
    API = "api"
    PROTOCOL = "protocol"
    DECODE = "decode"


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T

    @property
    def is_ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Failure:
    """
    A classified failure.

    `code` is the HTTP status for API failures, `field` the dotted path of the
    offending field for decode failures.
    """

    kind: ErrorKind
    message: str
    code: Optional[int] = None
    field: Optional[str] = None

    @property
    def is_ok(self) -> bool:
        return False

    @property
    def retryable(self) -> bool:
        """Only transport failures may be retried, and only with a freshly signed request."""
        return self.kind is ErrorKind.TRANSPORT

    def to_exception(self) -> ProviderError:
        return _exception_class(self)(self.message, code=self.code, field=self.field)

    def unwrap(self) -> NoReturn:
        raise self.to_exception()


ApiResult = Union[Success[T], Failure]


def _exception_class(failure: Failure) -> Type[ProviderError]:
    if failure.kind is ErrorKind.API:
        if failure.code == 429:
            return RateLimitProviderError
        if failure.code in (401, 403):
            return AuthProviderError
        return ApiProviderError
    return {
        ErrorKind.MISSING_CREDENTIALS: MissingCredentialsError,
        ErrorKind.VALIDATION: ValidationProviderError,
        ErrorKind.TRANSPORT: TransientProviderError,
        ErrorKind.PROTOCOL: ProtocolProviderError,
        ErrorKind.DECODE: DecodeProviderError,
    }[failure.kind]
