from __future__ import annotations

from typing import Awaitable, Optional

from rich.console import Console

from coincheck_client.result import ApiResult, Failure

console = Console()


async def quick_debug(task: Awaitable[ApiResult], out: Optional[Console] = None) -> ApiResult:
    """Await an API call and print its result. For quick API checking.

        async with Coincheck.from_env() as cc:
            await quick_debug(cc.public.ticker())
    """
    out = out or console
    result = await task
    if isinstance(result, Failure):
        code = f" {result.code}" if result.code is not None else ""
        out.print(f"[red]error ({result.kind.value}{code}):[/red] {result.message}")
    else:
        out.print(result.value)
    return result
