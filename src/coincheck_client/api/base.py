from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Union

from coincheck_client.core.rest import RestClient
from coincheck_client.result import ErrorKind, Failure

Amount = Union[Decimal, int, float, str]


class InputError(ValueError):
    """Raised by validators; converted to a VALIDATION failure before any request is built."""


def invalid(e: ValueError) -> Failure:
    return Failure(ErrorKind.VALIDATION, str(e))


def positive_amount(name: str, value: Amount) -> str:
    """Normalise a numeric input to its wire string; rejects non-positive and non-finite values."""
    try:
        amount = Decimal(str(value))
    except (InvalidOperation, ValueError):
        raise InputError(f"{name} must be a number, got {value!r}") from None
    if not amount.is_finite() or amount <= 0:
        raise InputError(f"{name} must be a positive number, got {value!r}")
    return format(amount.normalize(), "f")


def positive_id(name: str, value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise InputError(f"{name} must be a positive integer, got {value!r}")
    return value


class EndpointGroup:
    def __init__(self, rest: RestClient):
        self._rest = rest
