from __future__ import annotations

from enum import Enum
from typing import Dict, Optional, Type, TypeVar, Union

from pydantic import BaseModel, Field

E = TypeVar("E", bound="_StrEnum")


class _StrEnum(str, Enum):
    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls: Type[E], value: Union[str, E]) -> E:
        """Accept an enum member or its wire value (case-insensitive)."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            allowed = ", ".join(m.value for m in cls)
            raise ValueError(f"unknown {cls.__name__} {value!r} (expected one of: {allowed})") from None


class Currency(str, Enum):
    JPY = "JPY"
    BTC = "BTC"

    def __str__(self) -> str:
        return self.value


class CoinPair(_StrEnum):
    """Trading pairs accepted by the exchange."""

    BTC_JPY = "btc_jpy"
    ETC_JPY = "etc_jpy"
    FCT_JPY = "fct_jpy"
    MONA_JPY = "mona_jpy"
    PLT_JPY = "plt_jpy"


class BaseOrderType(_StrEnum):
    BUY = "buy"
    SELL = "sell"


class OrderType(_StrEnum):
    """Wire value of `order_type` on new orders. Limit orders use plain buy/sell."""

    LIMIT_BUY = "buy"
    LIMIT_SELL = "sell"
    MARKET_BUY = "market_buy"
    MARKET_SELL = "market_sell"


class SortOrder(_StrEnum):
    ASC = "asc"
    DESC = "desc"


class Pagination(BaseModel):
    """Cursor pagination shared by list endpoints."""

    limit: int = Field(default=25, ge=1, le=100)
    order: SortOrder = SortOrder.DESC
    starting_after: Optional[int] = None
    ending_before: Optional[int] = None

    def to_params(self) -> Dict[str, str]:
        params = {"limit": str(self.limit), "order": self.order.value}
        if self.starting_after is not None:
            params["starting_after"] = str(self.starting_after)
        if self.ending_before is not None:
            params["ending_before"] = str(self.ending_before)
        return params
