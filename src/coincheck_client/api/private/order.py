"""Order placement, cancellation and trade history."""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Dict, Optional

from coincheck_client.api.base import (
    Amount,
    EndpointGroup,
    InputError,
    invalid,
    positive_amount,
    positive_id,
)
from coincheck_client.api.public import PairLike
from coincheck_client.endpoints import Endpoints
from coincheck_client.models.order import (
    CancelResult,
    CancelStatus,
    OpenOrders,
    OrderResult,
    OrderTransactions,
    OrderTransactionsPage,
)
from coincheck_client.result import ApiResult
from coincheck_client.types import CoinPair, OrderType, Pagination


# Numeric order fields; each must be a positive decimal.
_AMOUNT_FIELDS = ("rate", "amount", "market_buy_amount", "stop_loss_rate")


def _order_params(
    pair: PairLike,
    order_type: OrderType,
    stop_loss_rate: Optional[Amount] = None,
    **amounts: Optional[Amount],
) -> Dict[str, str]:
    params = {"pair": CoinPair.parse(pair).value, "order_type": order_type.value}
    for name, value in amounts.items():
        params[name] = positive_amount(name, value)
    if stop_loss_rate is not None:
        params["stop_loss_rate"] = positive_amount("stop_loss_rate", stop_loss_rate)
    return params


def _checked_params(params: Dict[str, Any]) -> Dict[str, Any]:
    """Normalise caller-built order params to JSON-safe wire values."""
    if not isinstance(params, dict):
        raise InputError(f"order params must be a dict, got {type(params).__name__}")
    checked: Dict[str, Any] = {}
    for name, value in params.items():
        if value is None:
            continue
        if name == "pair":
            checked[name] = CoinPair.parse(value).value
        elif name == "order_type":
            checked[name] = OrderType.parse(value).value
        elif name in _AMOUNT_FIELDS:
            checked[name] = positive_amount(name, value)
        elif isinstance(value, Decimal):
            checked[name] = format(value, "f")
        elif isinstance(value, (str, int, float, bool)):
            checked[name] = value
        else:
            raise InputError(f"unsupported value for {name!r}: {type(value).__name__}")
    for required in ("pair", "order_type"):
        if required not in checked:
            raise InputError(f"order params require {required!r}")
    return checked


class OrderApi(EndpointGroup):
    async def new_any(self, params: Dict[str, Any]) -> ApiResult[OrderResult]:
        """Place an order with caller-built parameters. Prefer the typed helpers below."""
        try:
            params = _checked_params(params)
        except (ValueError, TypeError) as e:
            return invalid(e)
        return await self._rest.request(Endpoints.NEW_ORDER, OrderResult, params=params)

    async def _new(self, pair, order_type, stop_loss_rate=None, **amounts) -> ApiResult[OrderResult]:
        try:
            params = _order_params(pair, order_type, stop_loss_rate, **amounts)
        except ValueError as e:
            return invalid(e)
        return await self._rest.request(Endpoints.NEW_ORDER, OrderResult, params=params)

    async def new_limit_buy(self, pair: PairLike, rate: Amount, amount: Amount) -> ApiResult[OrderResult]:
        return await self._new(pair, OrderType.LIMIT_BUY, rate=rate, amount=amount)

    async def new_limit_sell(self, pair: PairLike, rate: Amount, amount: Amount) -> ApiResult[OrderResult]:
        return await self._new(pair, OrderType.LIMIT_SELL, rate=rate, amount=amount)

    async def new_stop_limit_buy(
        self, pair: PairLike, rate: Amount, amount: Amount, stop_loss_rate: Amount
    ) -> ApiResult[OrderResult]:
        return await self._new(pair, OrderType.LIMIT_BUY, stop_loss_rate, rate=rate, amount=amount)

    async def new_stop_limit_sell(
        self, pair: PairLike, rate: Amount, amount: Amount, stop_loss_rate: Amount
    ) -> ApiResult[OrderResult]:
        return await self._new(pair, OrderType.LIMIT_SELL, stop_loss_rate, rate=rate, amount=amount)

    async def new_market_buy(self, pair: PairLike, amount_jpy: Amount) -> ApiResult[OrderResult]:
        """Market buy spending `amount_jpy` of the quote currency."""
        return await self._new(pair, OrderType.MARKET_BUY, market_buy_amount=amount_jpy)

    async def new_market_sell(self, pair: PairLike, amount: Amount) -> ApiResult[OrderResult]:
        return await self._new(pair, OrderType.MARKET_SELL, amount=amount)

    async def new_stop_market_buy(
        self, pair: PairLike, amount_jpy: Amount, stop_loss_rate: Amount
    ) -> ApiResult[OrderResult]:
        return await self._new(pair, OrderType.MARKET_BUY, stop_loss_rate, market_buy_amount=amount_jpy)

    async def new_stop_market_sell(
        self, pair: PairLike, amount: Amount, stop_loss_rate: Amount
    ) -> ApiResult[OrderResult]:
        return await self._new(pair, OrderType.MARKET_SELL, stop_loss_rate, amount=amount)

    async def opens(self) -> ApiResult[OpenOrders]:
        return await self._rest.request(Endpoints.OPEN_ORDERS, OpenOrders)

    async def cancel(self, order_id: int) -> ApiResult[CancelResult]:
        try:
            order_id = positive_id("order_id", order_id)
        except ValueError as e:
            return invalid(e)
        return await self._rest.request(
            Endpoints.CANCEL_ORDER, CancelResult, path_params={"id": order_id}
        )

    async def cancel_status(self, order_id: int) -> ApiResult[CancelStatus]:
        try:
            order_id = positive_id("order_id", order_id)
        except ValueError as e:
            return invalid(e)
        return await self._rest.request(
            Endpoints.CANCEL_STATUS, CancelStatus, params={"id": str(order_id)}
        )

    async def transactions(self) -> ApiResult[OrderTransactions]:
        return await self._rest.request(Endpoints.TRANSACTIONS, OrderTransactions)

    async def transactions_pagination(
        self, pagination: Optional[Pagination] = None
    ) -> ApiResult[OrderTransactionsPage]:
        pagination = pagination or Pagination()
        return await self._rest.request(
            Endpoints.TRANSACTIONS_PAGINATION, OrderTransactionsPage, params=pagination.to_params()
        )
