"""Tests for the one-shot agent run."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from config.settings import Settings
from studio_agent import agent as agent_module
from studio_agent.agent import run_agent, select_target
from studio_agent.api.exceptions import PumpStudioApiError
from studio_agent.api.models import (
    AgentProfile,
    MarketToken,
    ProfileResponse,
    RegisteredKey,
    RegisterResponse,
    SubmissionPayload,
    SubmitResult,
)

VALID_MINT = "So1anaMintAddre55xxxxxxxxxxxxxxxxxxxxxpump"


def _settings(**kwargs) -> Settings:
    defaults = {"pump_studio_api_key": "ps_test_key_1234567890"}
    defaults.update(kwargs)
    return Settings(_env_file=None, **defaults)


@pytest.fixture
def fake_client(monkeypatch, healthy_datapoint):
    client = AsyncMock()
    client.get_profile.return_value = ProfileResponse(ok=True, profile=AgentProfile(name="agent"))
    client.get_market.return_value = [
        MarketToken(mint="short", symbol="BAD"),
        MarketToken(mint=VALID_MINT, symbol="HLT", name="Healthy"),
    ]
    client.get_datapoint.return_value = healthy_datapoint
    client.submit_analysis.return_value = SubmitResult(
        ok=True, xpEarned=10, xpTotal=120, validated=True, deviationPct=1.5, analysisId="a1",
    )
    factory = MagicMock(return_value=client)
    monkeypatch.setattr(agent_module, "PumpStudioClient", factory)
    return client


def test_select_target_skips_short_mints():
    tokens = [MarketToken(mint=""), MarketToken(mint="abc"), MarketToken(mint=VALID_MINT)]
    assert select_target(tokens).mint == VALID_MINT
    assert select_target([MarketToken(mint="abc")]) is None


@pytest.mark.asyncio
async def test_full_run_submits_analysis(fake_client):
    code = await run_agent(_settings(market_tab="new", market_limit=3))

    assert code == 0
    fake_client.get_market.assert_awaited_once_with("new", 3)
    fake_client.get_datapoint.assert_awaited_once_with(VALID_MINT)
    payload = fake_client.submit_analysis.await_args.args[0]
    assert isinstance(payload, SubmissionPayload)
    assert payload.mint == VALID_MINT
    assert payload.sentiment == "bullish"
    fake_client.set_profile.assert_not_awaited()
    fake_client.close.assert_awaited_once()


@pytest.mark.asyncio
async def test_missing_profile_is_created(fake_client):
    fake_client.get_profile.return_value = ProfileResponse(ok=True, profile=None)
    assert await run_agent(_settings(agent_name="quant-bot")) == 0
    fake_client.set_profile.assert_awaited_once()
    assert fake_client.set_profile.await_args.args[0] == "quant-bot"


@pytest.mark.asyncio
async def test_profile_failure_is_not_fatal(fake_client):
    fake_client.get_profile.side_effect = PumpStudioApiError("GET /api/v1/agent/profile: HTTP 500", 500)
    assert await run_agent(_settings()) == 0
    fake_client.submit_analysis.assert_awaited_once()


@pytest.mark.asyncio
async def test_no_tokens_fails(fake_client):
    fake_client.get_market.return_value = []
    assert await run_agent(_settings()) == 1
    fake_client.get_datapoint.assert_not_awaited()


@pytest.mark.asyncio
async def test_discovery_error_fails(fake_client):
    fake_client.get_market.side_effect = PumpStudioApiError("GET /api/v1/market: down", 503)
    assert await run_agent(_settings()) == 1
    fake_client.close.assert_awaited_once()


@pytest.mark.asyncio
async def test_no_valid_mint_fails(fake_client):
    fake_client.get_market.return_value = [MarketToken(mint="short")]
    assert await run_agent(_settings()) == 1


@pytest.mark.asyncio
async def test_rejected_submission_fails(fake_client):
    fake_client.submit_analysis.return_value = SubmitResult(ok=False, error="cooldown active")
    assert await run_agent(_settings()) == 1


@pytest.mark.asyncio
async def test_registers_when_key_missing(fake_client):
    fake_client.register.return_value = RegisterResponse(
        ok=True, data=RegisteredKey(key="ps_brand_new"),
    )
    assert await run_agent(_settings(pump_studio_api_key="")) == 0
    fake_client.register.assert_awaited_once()
    fake_client.get_market.assert_not_awaited()


@pytest.mark.asyncio
async def test_placeholder_key_triggers_registration(fake_client):
    fake_client.register.return_value = RegisterResponse(ok=False, error="name taken")
    assert await run_agent(_settings(pump_studio_api_key="ps_your_key_here")) == 1
    fake_client.register.assert_awaited_once()


@pytest.mark.asyncio
async def test_registration_error(fake_client):
    fake_client.register.side_effect = PumpStudioApiError("POST /api/v1/keys/register: HTTP 403", 403)
    assert await run_agent(_settings(pump_studio_api_key="")) == 1
    fake_client.close.assert_awaited_once()
