from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import model_validator

from coincheck_client.models.base import ApiModel, Price


class Balance(ApiModel):
    """
    Account balance. jpy/btc exclude the amounts reserved by open orders.
    Accepts both the flat payload and one nested under a "balance" key.
    """

    jpy: Price
    btc: Price
    jpy_reserved: Optional[Price] = None
    btc_reserved: Optional[Price] = None
    jpy_lend_in_use: Optional[Price] = None
    btc_lend_in_use: Optional[Price] = None
    jpy_lent: Optional[Price] = None
    btc_lent: Optional[Price] = None
    jpy_debt: Optional[Price] = None
    btc_debt: Optional[Price] = None

    @model_validator(mode="before")
    @classmethod
    def unwrap_balance(cls, data: Any) -> Any:
        if isinstance(data, dict) and isinstance(data.get("balance"), dict):
            return data["balance"]
        return data


class SendRecord(ApiModel):
    id: int
    amount: Price
    currency: str
    fee: Price
    address: str
    created_at: datetime


class SendHistory(ApiModel):
    sends: List[SendRecord]


class DepositRecord(ApiModel):
    id: int
    amount: Price
    currency: str
    address: str
    status: str
    confirmed_at: Optional[str] = None
    created_at: datetime


class DepositHistory(ApiModel):
    deposits: List[DepositRecord]


class Fee(ApiModel):
    taker_fee: Price
    maker_fee: Price


class AccountInfo(ApiModel):
    id: int
    email: str
    identity_status: str
    bitcoin_address: Optional[str] = None
    taker_fee: Price
    maker_fee: Price
    exchange_fees: Dict[str, Fee] = {}
