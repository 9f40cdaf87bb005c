from coincheck_client.core.rest import RestClient

from .account import AccountApi
from .order import OrderApi
from .withdraws_jpy import WithdrawsJpyApi


class PrivateApi:
    """Endpoints that require credentials. Calls without them return MISSING_CREDENTIALS."""

    def __init__(self, rest: RestClient):
        self.account = AccountApi(rest)
        self.order = OrderApi(rest)
        self.withdraws_jpy = WithdrawsJpyApi(rest)


__all__ = ["PrivateApi", "AccountApi", "OrderApi", "WithdrawsJpyApi"]
