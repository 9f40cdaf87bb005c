from .base import ApiModel, PaginationInfo
from .public import CalculatedRate, ExchangeRate, OrderBooks, Ticker, Trade, Trades
from .account import AccountInfo, Balance, DepositHistory, DepositRecord, Fee, SendHistory, SendRecord
from .order import (
    CancelResult,
    CancelStatus,
    OpenOrder,
    OpenOrders,
    OrderResult,
    OrderTransaction,
    OrderTransactions,
    OrderTransactionsPage,
)
from .withdraws import BankAccount, BankAccounts, Withdraw, Withdraws

__all__ = [
    "ApiModel",
    "PaginationInfo",
    "CalculatedRate",
    "ExchangeRate",
    "OrderBooks",
    "Ticker",
    "Trade",
    "Trades",
    "AccountInfo",
    "Balance",
    "DepositHistory",
    "DepositRecord",
    "Fee",
    "SendHistory",
    "SendRecord",
    "CancelResult",
    "CancelStatus",
    "OpenOrder",
    "OpenOrders",
    "OrderResult",
    "OrderTransaction",
    "OrderTransactions",
    "OrderTransactionsPage",
    "BankAccount",
    "BankAccounts",
    "Withdraw",
    "Withdraws",
]
