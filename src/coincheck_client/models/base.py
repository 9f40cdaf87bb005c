from __future__ import annotations

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict

from coincheck_client.types import SortOrder


class ApiModel(BaseModel):
    """Base for response payloads. Unknown fields are ignored so new API fields never break decoding."""

    model_config = ConfigDict(extra="ignore", frozen=True)


class PaginationInfo(ApiModel):
    limit: int
    order: SortOrder
    starting_after: Optional[int] = None
    ending_before: Optional[int] = None


Price = Decimal
