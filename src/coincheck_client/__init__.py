"""Async client for the Coincheck REST API."""

from coincheck_client.auth.credentials import Credentials, load_credentials
from coincheck_client.client import Coincheck
from coincheck_client.result import ApiResult, ErrorKind, Failure, Success
from coincheck_client.types import BaseOrderType, CoinPair, Currency, OrderType, Pagination, SortOrder

__version__ = "0.1.0"

__all__ = [
    "Coincheck",
    "Credentials",
    "load_credentials",
    "ApiResult",
    "ErrorKind",
    "Failure",
    "Success",
    "BaseOrderType",
    "CoinPair",
    "Currency",
    "OrderType",
    "Pagination",
    "SortOrder",
]
