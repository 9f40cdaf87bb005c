from __future__ import annotations

from datetime import datetime
from typing import List, Tuple

from coincheck_client.models.base import ApiModel, PaginationInfo, Price


class Ticker(ApiModel):
    last: Price
    bid: Price
    ask: Price
    high: Price
    low: Price
    volume: Price
    timestamp: int


class Trade(ApiModel):
    id: int
    amount: Price
    rate: Price
    pair: str
    order_type: str
    created_at: datetime


class Trades(ApiModel):
    pagination: PaginationInfo
    data: List[Trade]


class OrderBooks(ApiModel):
    """Each level is (rate, amount)."""

    asks: List[Tuple[Price, Price]]
    bids: List[Tuple[Price, Price]]


class CalculatedRate(ApiModel):
    rate: Price
    price: Price
    amount: Price


class ExchangeRate(ApiModel):
    rate: Price
