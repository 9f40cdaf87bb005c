from __future__ import annotations

from datetime import datetime
from typing import Dict, List, Optional

from coincheck_client.models.base import ApiModel, PaginationInfo, Price


class OrderResult(ApiModel):
    id: int
    rate: Optional[Price] = None
    amount: Optional[Price] = None
    order_type: str
    stop_loss_rate: Optional[Price] = None
    pair: str
    created_at: datetime


class OpenOrder(ApiModel):
    id: int
    order_type: str
    rate: Optional[Price] = None
    pair: str
    pending_amount: Optional[Price] = None
    pending_market_buy_amount: Optional[Price] = None
    stop_loss_rate: Optional[Price] = None
    created_at: datetime


class OpenOrders(ApiModel):
    orders: List[OpenOrder]


class CancelResult(ApiModel):
    id: int


class CancelStatus(ApiModel):
    id: int
    cancel: bool
    created_at: datetime


class OrderTransaction(ApiModel):
    id: int
    order_id: int
    created_at: datetime
    funds: Dict[str, Price]
    pair: str
    rate: Price
    fee_currency: Optional[str] = None
    fee: Price
    liquidity: str
    side: str


class OrderTransactions(ApiModel):
    transactions: List[OrderTransaction]


class OrderTransactionsPage(ApiModel):
    pagination: PaginationInfo
    data: List[OrderTransaction]
