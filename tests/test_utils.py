from io import StringIO

import pytest
from rich.console import Console

from coincheck_client.result import ErrorKind, Failure, Success
from coincheck_client.utils import quick_debug


async def _value(result):
    return result


@pytest.mark.asyncio
async def test_quick_debug_prints_value_and_returns_result():
    out = Console(file=StringIO(), width=120)
    result = await quick_debug(_value(Success({"rate": "1"})), out=out)
    assert result.is_ok
    assert "rate" in out.file.getvalue()


@pytest.mark.asyncio
async def test_quick_debug_prints_failure():
    out = Console(file=StringIO(), width=120)
    failure = Failure(ErrorKind.API, "invalid authentication", code=401)
    result = await quick_debug(_value(failure), out=out)
    assert result is failure
    assert "error (api 401): invalid authentication" in out.file.getvalue()
