from __future__ import annotations

from typing import Union

from coincheck_client.api.base import EndpointGroup, InputError, invalid
from coincheck_client.endpoints import Endpoints
from coincheck_client.models.account import AccountInfo, Balance, DepositHistory, SendHistory
from coincheck_client.result import ApiResult
from coincheck_client.types import Currency


def _currency(value: Union[Currency, str]) -> str:
    try:
        return Currency(str(value).upper()).value
    except ValueError:
        raise InputError(f"unknown Currency {value!r}") from None


class AccountApi(EndpointGroup):
    """Balances, transfer history and account information."""

    async def balance(self) -> ApiResult[Balance]:
        return await self._rest.request(Endpoints.BALANCE, Balance)

    async def sends(self, currency: Union[Currency, str] = Currency.BTC) -> ApiResult[SendHistory]:
        try:
            params = {"currency": _currency(currency)}
        except ValueError as e:
            return invalid(e)
        return await self._rest.request(Endpoints.SEND_MONEY, SendHistory, params=params)

    async def deposits(self, currency: Union[Currency, str] = Currency.BTC) -> ApiResult[DepositHistory]:
        try:
            params = {"currency": _currency(currency)}
        except ValueError as e:
            return invalid(e)
        return await self._rest.request(Endpoints.DEPOSIT_MONEY, DepositHistory, params=params)

    async def info(self) -> ApiResult[AccountInfo]:
        return await self._rest.request(Endpoints.ACCOUNT_INFO, AccountInfo)
