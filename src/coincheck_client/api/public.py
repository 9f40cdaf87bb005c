"""Public API: ticker, trades, order book and rates. No credentials needed."""

from __future__ import annotations

from typing import Optional, Union

from coincheck_client.api.base import Amount, EndpointGroup, invalid, positive_amount
from coincheck_client.endpoints import Endpoints
from coincheck_client.models.public import CalculatedRate, ExchangeRate, OrderBooks, Ticker, Trades
from coincheck_client.result import ApiResult
from coincheck_client.types import BaseOrderType, CoinPair, Pagination

PairLike = Union[CoinPair, str]


class PublicApi(EndpointGroup):
    async def ticker(self, pair: PairLike = CoinPair.BTC_JPY) -> ApiResult[Ticker]:
        try:
            pair = CoinPair.parse(pair)
        except ValueError as e:
            return invalid(e)
        return await self._rest.request(Endpoints.TICKER, Ticker, params={"pair": pair.value})

    async def trades(
        self, pair: PairLike = CoinPair.BTC_JPY, pagination: Optional[Pagination] = None
    ) -> ApiResult[Trades]:
        try:
            pair = CoinPair.parse(pair)
        except ValueError as e:
            return invalid(e)
        params = {"pair": pair.value}
        if pagination is not None:
            params.update(pagination.to_params())
        return await self._rest.request(Endpoints.TRADES, Trades, params=params)

    async def order_book(self, pair: PairLike = CoinPair.BTC_JPY) -> ApiResult[OrderBooks]:
        try:
            pair = CoinPair.parse(pair)
        except ValueError as e:
            return invalid(e)
        return await self._rest.request(Endpoints.ORDER_BOOKS, OrderBooks, params={"pair": pair.value})

    async def order_rate_from_amount(
        self, order_type: Union[BaseOrderType, str], pair: PairLike, amount: Amount
    ) -> ApiResult[CalculatedRate]:
        """Rate the order book would fill `amount` (base currency) at."""
        return await self._order_rate(order_type, pair, "amount", amount)

    async def order_rate_from_price(
        self, order_type: Union[BaseOrderType, str], pair: PairLike, price: Amount
    ) -> ApiResult[CalculatedRate]:
        """Rate the order book would fill `price` (quote currency) at."""
        return await self._order_rate(order_type, pair, "price", price)

    async def _order_rate(self, order_type, pair, key: str, value: Amount) -> ApiResult[CalculatedRate]:
        try:
            params = {
                "order_type": BaseOrderType.parse(order_type).value,
                "pair": CoinPair.parse(pair).value,
                key: positive_amount(key, value),
            }
        except ValueError as e:
            return invalid(e)
        return await self._rest.request(Endpoints.ORDER_RATE, CalculatedRate, params=params)

    async def marketplace_buy_rate(self, pair: PairLike = CoinPair.BTC_JPY) -> ApiResult[ExchangeRate]:
        try:
            pair = CoinPair.parse(pair)
        except ValueError as e:
            return invalid(e)
        return await self._rest.request(
            Endpoints.BUY_RATE, ExchangeRate, path_params={"pair": pair.value}
        )
