"""Tests for the Pump Studio API client."""

from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from studio_agent.analyzer import analyze
from studio_agent.api import client as client_module
from studio_agent.api.client import PumpStudioClient
from studio_agent.api.exceptions import (
    NonJsonResponseError,
    PumpStudioApiError,
    PumpStudioRateLimitError,
)
from studio_agent.api.models import build_submission


def _mock_response(status_code: int = 200, json_data=None, text: str = "") -> MagicMock:
    resp = MagicMock()
    resp.status_code = status_code
    if json_data is None:
        resp.json.side_effect = ValueError("not json")
    else:
        resp.json.return_value = json_data
    resp.text = text
    return resp


def _make_client(*responses) -> PumpStudioClient:
    client = PumpStudioClient("https://api.example.test/", "ps_test", max_rps=1000.0)
    client._client = AsyncMock()
    client._client.request = AsyncMock(side_effect=list(responses))
    return client


@pytest.fixture(autouse=True)
def _no_retry_delay(monkeypatch):
    monkeypatch.setattr(client_module, "RETRY_DELAYS", [0.0, 0.0])


class TestClientConstruction:
    @pytest.mark.asyncio
    async def test_bearer_header_when_key_set(self) -> None:
        client = PumpStudioClient("https://api.example.test", "ps_abc")
        assert client._client.headers["Authorization"] == "Bearer ps_abc"
        await client.close()

    @pytest.mark.asyncio
    async def test_no_auth_header_without_key(self) -> None:
        client = PumpStudioClient("https://api.example.test", None)
        assert "Authorization" not in client._client.headers
        await client.close()


class TestRequests:
    @pytest.mark.asyncio
    async def test_get_market(self) -> None:
        client = _make_client(_mock_response(json_data={
            "ok": True,
            "data": [
                {"mint": "MintA" * 8, "name": "Alpha", "symbol": "A", "usd_market_cap": 12000},
                {"mint": "MintB" * 8, "name": "Beta", "symbol": "B", "unknown": 1},
            ],
        }))

        tokens = await client.get_market("live", 2)

        assert [t.symbol for t in tokens] == ["A", "B"]
        assert tokens[0].usd_market_cap == 12000
        args, kwargs = client._client.request.call_args
        assert args == ("GET", "https://api.example.test/api/v1/market")
        assert kwargs["params"] == {"tab": "live", "limit": 2, "format": "json"}

    @pytest.mark.asyncio
    async def test_get_market_missing_data(self) -> None:
        client = _make_client(_mock_response(json_data={"ok": True}))
        assert await client.get_market() == []

    @pytest.mark.asyncio
    async def test_get_datapoint(self) -> None:
        client = _make_client(_mock_response(json_data={
            "ok": True,
            "data": {
                "mint": "DpMint",
                "name": "Token",
                "symbol": "TKN",
                "marketCap": 50000,
                "liquidity": None,
                "bondingComplete": False,
                "topHolders": [{"address": "w1", "amount": 10, "pct": 12.5}],
                "someNewField": "ignored",
            },
        }))

        dp = await client.get_datapoint("DpMint")

        assert dp.mint == "DpMint"
        assert dp.marketCap == 50000
        assert dp.liquidity is None
        assert dp.topHolders[0].pct == 12.5

    @pytest.mark.asyncio
    async def test_get_datapoint_without_data_raises(self) -> None:
        client = _make_client(_mock_response(json_data={"ok": True, "data": None}))
        with pytest.raises(PumpStudioApiError, match="No DataPoint"):
            await client.get_datapoint("Nothing")

    @pytest.mark.asyncio
    async def test_get_context(self) -> None:
        client = _make_client(_mock_response(json_data={
            "ok": True,
            "data": {"mint": "CtxMint", "systemPrompt": "sys", "context": "ctx", "analysisSchema": "{}"},
        }))
        ctx = await client.get_context("CtxMint")
        assert ctx.systemPrompt == "sys"

    @pytest.mark.asyncio
    async def test_register(self) -> None:
        client = _make_client(_mock_response(json_data={
            "ok": True,
            "data": {"key": "ps_new", "type": "free", "rateLimit": 60},
        }))
        result = await client.register("agent", "desc")
        assert result.ok is True
        assert result.data.key == "ps_new"
        _, kwargs = client._client.request.call_args
        assert kwargs["json"] == {"name": "agent", "description": "desc"}

    @pytest.mark.asyncio
    async def test_set_profile_optional_fields(self) -> None:
        client = _make_client(_mock_response(json_data={"ok": True}))
        assert await client.set_profile("agent", "desc", website="https://a.b") is True
        _, kwargs = client._client.request.call_args
        assert kwargs["json"] == {"name": "agent", "description": "desc", "website": "https://a.b"}

    @pytest.mark.asyncio
    async def test_submit_analysis_sends_camel_case(self, healthy_datapoint, now_ms) -> None:
        client = _make_client(_mock_response(json_data={
            "ok": True, "xpEarned": 10, "xpTotal": 110, "validated": True, "deviationPct": 2.1,
        }))
        payload = build_submission(healthy_datapoint.mint, analyze(healthy_datapoint, now_ms=now_ms))

        result = await client.submit_analysis(payload)

        assert result.ok is True
        assert result.xpEarned == 10
        _, kwargs = client._client.request.call_args
        body = kwargs["json"]
        assert body["mint"] == healthy_datapoint.mint
        assert body["sentiment"] == "bullish"
        assert body["quant"]["liquidityDepth"] == "deep"
        assert body["quant"]["riskFactors"][0] == "no_website"
        assert body["snapshot"]["top10HolderPct"] == 15.0


class TestErrors:
    @pytest.mark.asyncio
    async def test_api_error_uses_body_message(self) -> None:
        client = _make_client(_mock_response(400, json_data={"ok": False, "error": "bad mint"}))
        with pytest.raises(PumpStudioApiError, match="bad mint") as exc_info:
            await client.get_datapoint("x")
        assert exc_info.value.status_code == 400

    @pytest.mark.asyncio
    async def test_api_error_without_message(self) -> None:
        client = _make_client(_mock_response(500, json_data={"ok": False}))
        with pytest.raises(PumpStudioApiError, match="HTTP 500"):
            await client.get_profile()

    @pytest.mark.asyncio
    async def test_non_json_body(self) -> None:
        client = _make_client(_mock_response(502, text="<html>" + "x" * 500))
        with pytest.raises(NonJsonResponseError, match="non-JSON \\(502\\)") as exc_info:
            await client.get_market()
        assert len(str(exc_info.value)) < 300

    @pytest.mark.asyncio
    async def test_rate_limit_retried(self) -> None:
        client = _make_client(
            _mock_response(429, json_data={"error": "slow down"}),
            _mock_response(json_data={"ok": True, "data": []}),
        )
        assert await client.get_market() == []
        assert client._client.request.await_count == 2

    @pytest.mark.asyncio
    async def test_rate_limit_exhausted(self) -> None:
        client = _make_client(*[_mock_response(429, json_data={}) for _ in range(3)])
        with pytest.raises(PumpStudioRateLimitError):
            await client.get_market()
        assert client._client.request.await_count == 3

    @pytest.mark.asyncio
    async def test_timeout_retried_then_raised(self) -> None:
        client = _make_client(*[httpx.ConnectTimeout("timeout") for _ in range(3)])
        with pytest.raises(httpx.TimeoutException):
            await client.get_market()
        assert client._client.request.await_count == 3

    @pytest.mark.asyncio
    async def test_timeout_then_success(self) -> None:
        client = _make_client(
            httpx.ReadTimeout("timeout"),
            _mock_response(json_data={"ok": True, "profile": {"name": "agent"}}),
        )
        profile = await client.get_profile()
        assert profile.profile.name == "agent"
