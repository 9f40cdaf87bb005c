import httpx
from typer.testing import CliRunner

from conftest import WireRecorder, ok
from coincheck_client import cli
from coincheck_client.client import Coincheck
from coincheck_client.core.config import ClientSettings

runner = CliRunner()


def fake_coincheck(monkeypatch, replies, with_keys=False):
    recorder = WireRecorder(replies)

    class FakeCoincheck(Coincheck):
        @classmethod
        def from_env(cls, env_file=None, **kwargs):
            client = httpx.AsyncClient(transport=httpx.MockTransport(recorder))
            if with_keys:
                return cls.with_keys("cli-access-key", "cli-secret-key",
                                     settings=ClientSettings(), http_client=client)
            return cls.without_keys(settings=ClientSettings(), http_client=client)

    monkeypatch.setattr(cli, "Coincheck", FakeCoincheck)
    return recorder


def test_ticker_prints_json(monkeypatch):
    ticker = {"last": 27390, "bid": 26900, "ask": 27390, "high": 27659, "low": 26400,
              "volume": "50.29627103", "timestamp": 1423377841}
    recorder = fake_coincheck(monkeypatch, [ok(ticker)])
    result = runner.invoke(cli.app, ["ticker", "--pair", "etc_jpy"])
    assert result.exit_code == 0
    assert "50.29627103" in result.output
    assert recorder.requests[0].url.params["pair"] == "etc_jpy"


def test_invalid_pair_exits_nonzero(monkeypatch):
    recorder = fake_coincheck(monkeypatch, [])
    result = runner.invoke(cli.app, ["ticker", "--pair", "doge"])
    assert result.exit_code == 1
    assert "Error (validation)" in result.output
    assert recorder.requests == []


def test_balance_without_keys_reports_missing_credentials(monkeypatch):
    fake_coincheck(monkeypatch, [])
    result = runner.invoke(cli.app, ["balance"])
    assert result.exit_code == 1
    assert "missing_credentials" in result.output


def test_balance_with_keys(monkeypatch):
    recorder = fake_coincheck(monkeypatch, [ok({"success": True, "jpy": "1000", "btc": "0.1"})],
                              with_keys=True)
    result = runner.invoke(cli.app, ["balance"])
    assert result.exit_code == 0
    assert "0.1" in result.output
    assert "ACCESS-SIGNATURE" in recorder.requests[0].headers


def test_rate_passes_side_and_amount(monkeypatch):
    recorder = fake_coincheck(monkeypatch, [ok({"rate": "30000", "price": "300", "amount": "0.01"})])
    result = runner.invoke(cli.app, ["rate", "sell", "0.01"])
    assert result.exit_code == 0
    params = recorder.requests[0].url.params
    assert params["order_type"] == "sell"
    assert params["amount"] == "0.01"
