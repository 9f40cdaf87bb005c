from __future__ import annotations

from datetime import datetime
from typing import List

from coincheck_client.models.base import ApiModel, PaginationInfo, Price


class BankAccount(ApiModel):
    id: int
    bank_name: str
    branch_name: str
    bank_account_type: str
    number: str
    name: str


class BankAccounts(ApiModel):
    data: List[BankAccount]


class Withdraw(ApiModel):
    id: int
    status: str
    amount: Price
    currency: str
    created_at: datetime
    bank_account_id: int
    fee: Price
    is_fast: bool


class Withdraws(ApiModel):
    pagination: PaginationInfo
    data: List[Withdraw]
