"""Endpoint catalog. Each entry is one HTTP method + path; `{name}` placeholders are filled by the caller."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Endpoint:
    method: str
    path: str
    private: bool

    def format_path(self, **path_params: Any) -> str:
        return self.path.format(**path_params)


class Endpoints:
    # Public
    TICKER = Endpoint("GET", "/api/ticker", False)
    TRADES = Endpoint("GET", "/api/trades", False)
    ORDER_BOOKS = Endpoint("GET", "/api/order_books", False)
    ORDER_RATE = Endpoint("GET", "/api/exchange/orders/rate", False)
    BUY_RATE = Endpoint("GET", "/api/rate/{pair}", False)

    # Private - account
    BALANCE = Endpoint("GET", "/api/accounts/balance", True)
    SEND_MONEY = Endpoint("GET", "/api/send_money", True)
    DEPOSIT_MONEY = Endpoint("GET", "/api/deposit_money", True)
    ACCOUNT_INFO = Endpoint("GET", "/api/accounts", True)

    # Private - orders
    NEW_ORDER = Endpoint("POST", "/api/exchange/orders", True)
    OPEN_ORDERS = Endpoint("GET", "/api/exchange/orders/opens", True)
    CANCEL_ORDER = Endpoint("DELETE", "/api/exchange/orders/{id}", True)
    CANCEL_STATUS = Endpoint("GET", "/api/exchange/orders/cancel_status", True)
    TRANSACTIONS = Endpoint("GET", "/api/exchange/orders/transactions", True)
    TRANSACTIONS_PAGINATION = Endpoint("GET", "/api/exchange/orders/transactions_pagination", True)

    # Private - JPY withdrawals
    BANK_ACCOUNTS = Endpoint("GET", "/api/bank_accounts", True)
    WITHDRAWS = Endpoint("GET", "/api/withdraws", True)
