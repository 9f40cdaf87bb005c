from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Awaitable, Callable, Optional

import typer
from rich.console import Console

from coincheck_client.client import Coincheck
from coincheck_client.result import ApiResult, Failure
from coincheck_client.types import CoinPair

app = typer.Typer(add_completion=False, help="Coincheck REST API tools (public market data + account).")
console = Console()

ENV_FILE_OPTION = typer.Option(None, "--env-file", help="Optional .env file with COINCHECK_ACCESS_KEY / COINCHECK_SECRET_KEY.")


def _run(call: Callable[[Coincheck], Awaitable[ApiResult]], env_file: Optional[Path] = None) -> None:
    async def main() -> ApiResult:
        async with Coincheck.from_env(env_file) as cc:
            return await call(cc)

    result = asyncio.run(main())
    if isinstance(result, Failure):
        code = f" {result.code}" if result.code is not None else ""
        console.print(f"[red]Error ({result.kind.value}{code}):[/red] {result.message}")
        raise typer.Exit(code=1)
    console.print_json(json.dumps(result.value.model_dump(mode="json")))


@app.command()
def ticker(pair: str = typer.Option(CoinPair.BTC_JPY.value, help="Trading pair (ex: btc_jpy).")):
    """Latest ticker for a pair."""
    _run(lambda cc: cc.public.ticker(pair))


@app.command()
def trades(
    pair: str = typer.Option(CoinPair.BTC_JPY.value, help="Trading pair (ex: btc_jpy)."),
):
    """Recent public trades."""
    _run(lambda cc: cc.public.trades(pair))


@app.command("order-book")
def order_book(pair: str = typer.Option(CoinPair.BTC_JPY.value, help="Trading pair (ex: btc_jpy).")):
    """Current order book."""
    _run(lambda cc: cc.public.order_book(pair))


@app.command()
def rate(
    side: str = typer.Argument(..., help="buy or sell"),
    amount: str = typer.Argument(..., help="Order amount in the base currency."),
    pair: str = typer.Option(CoinPair.BTC_JPY.value, help="Trading pair (ex: btc_jpy)."),
):
    """Rate the order book would fill an order of AMOUNT at."""
    _run(lambda cc: cc.public.order_rate_from_amount(side, pair, amount))


@app.command()
def balance(env_file: Optional[Path] = ENV_FILE_OPTION):
    """Account balance (requires credentials)."""
    _run(lambda cc: cc.private.account.balance(), env_file)


@app.command()
def opens(env_file: Optional[Path] = ENV_FILE_OPTION):
    """Open orders (requires credentials)."""
    _run(lambda cc: cc.private.order.opens(), env_file)


if __name__ == "__main__":
    app()
