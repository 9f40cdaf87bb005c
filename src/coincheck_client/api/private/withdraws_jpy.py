from __future__ import annotations

from coincheck_client.api.base import EndpointGroup
from coincheck_client.endpoints import Endpoints
from coincheck_client.models.withdraws import BankAccounts, Withdraws
from coincheck_client.result import ApiResult


class WithdrawsJpyApi(EndpointGroup):
    """JPY bank withdrawals."""

    async def bank_accounts(self) -> ApiResult[BankAccounts]:
        return await self._rest.request(Endpoints.BANK_ACCOUNTS, BankAccounts)

    async def withdraws(self) -> ApiResult[Withdraws]:
        return await self._rest.request(Endpoints.WITHDRAWS, Withdraws)
