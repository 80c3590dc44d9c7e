"""One-shot agent run.

1. Register an API key (if none configured) and stop
2. Ensure an agent profile exists
3. Discover tokens from the market feed
4. Fetch a DataPoint for the first valid mint
5. Analyze with deterministic heuristics
6. Submit the structured analysis
"""

import httpx
from loguru import logger

from config.settings import Settings
from studio_agent.analyzer import analyze, format_compact
from studio_agent.api.client import PumpStudioClient
from studio_agent.api.exceptions import PumpStudioError
from studio_agent.api.models import MarketToken, build_submission
from studio_agent.models.datapoint import DataPoint
from studio_agent.models.quant import AnalysisResult

PLACEHOLDER_API_KEY = "ps_your_key_here"
MIN_MINT_LENGTH = 32

EXIT_OK = 0
EXIT_FAILED = 1

_CLIENT_ERRORS = (PumpStudioError, httpx.HTTPError)


def _has_api_key(cfg: Settings) -> bool:
    key = cfg.pump_studio_api_key
    return bool(key) and key != PLACEHOLDER_API_KEY


def _make_client(cfg: Settings, api_key: str | None) -> PumpStudioClient:
    return PumpStudioClient(
        cfg.pump_api_base,
        api_key,
        timeout=cfg.http_timeout_sec,
        max_rps=cfg.max_rps,
    )


def select_target(tokens: list[MarketToken]) -> MarketToken | None:
    """First token carrying a plausible mint address."""
    for token in tokens:
        if token.mint and len(token.mint) >= MIN_MINT_LENGTH:
            return token
    return None


async def register_key(cfg: Settings) -> int:
    logger.warning("[AUTH] No API key configured, registering a new one")
    client = _make_client(cfg, None)
    try:
        result = await client.register(cfg.agent_name, cfg.agent_description)
    except _CLIENT_ERRORS as e:
        logger.error(f"[REGISTER] {e}")
        logger.info("Get a key manually at https://pump.studio/agents")
        return EXIT_FAILED
    finally:
        await client.close()

    if not result.ok or result.data is None:
        logger.error(f"[REGISTER] {result.error or 'Unknown error'}")
        return EXIT_FAILED

    logger.success(f"[REGISTER] API key created: {result.data.key}")
    logger.info(f"Save it to .env as PUMP_STUDIO_API_KEY={result.data.key} and run again")
    return EXIT_OK


async def ensure_profile(client: PumpStudioClient, cfg: Settings) -> None:
    """Profile is optional for submissions, so failures only warn."""
    try:
        existing = await client.get_profile()
        if existing.ok and existing.profile is not None:
            logger.info(f"[PROFILE] Existing profile: {existing.profile.name}")
            return
        await client.set_profile(cfg.agent_name, cfg.agent_description)
        logger.info(f"[PROFILE] Profile set: {cfg.agent_name}")
    except _CLIENT_ERRORS as e:
        logger.warning(f"[PROFILE] Could not set profile: {e}")


def _log_datapoint(dp: DataPoint) -> None:
    price = f"${dp.priceUsd}" if dp.priceUsd is not None else "-"
    mcap = f"${format_compact(dp.marketCap)}" if dp.marketCap is not None else "-"
    liq = f"${format_compact(dp.liquidity)}" if dp.liquidity is not None else "-"
    vol = f"${format_compact(dp.volume24h)}" if dp.volume24h is not None else "-"
    if dp.bondingComplete:
        bonding = "graduated"
    elif dp.bondingProgress is not None:
        bonding = f"{dp.bondingProgress:.1f}%"
    else:
        bonding = "?"
    live = f"yes ({dp.viewerCount} viewers)" if dp.isLive else "no"

    logger.info(
        f"[SNAPSHOT] {dp.name} (${dp.symbol}): price={price} mcap={mcap} liq={liq} "
        f"holders={dp.holderCount if dp.holderCount is not None else '-'} vol24h={vol} "
        f"buys/sells={dp.buys24h or 0}/{dp.sells24h or 0} bonding={bonding} live={live}"
    )


def _log_analysis(result: AnalysisResult) -> None:
    quant = result.quant
    logger.info(f"[ANALYZE] {result.sentiment.upper()}: score {result.score}/100")
    logger.info(
        f"[ANALYZE] risk={quant.risk_level} bp={quant.buy_pressure}% "
        f"volatility={quant.volatility_score}/100 liquidity={quant.liquidity_depth} "
        f"holders={quant.holder_concentration} trend={quant.trend_direction} "
        f"volume={quant.volume_profile}"
    )
    logger.info(f"[ANALYZE] factors: {', '.join(quant.risk_factors)}")


async def analyze_and_submit(client: PumpStudioClient, cfg: Settings) -> int:
    try:
        tokens = await client.get_market(cfg.market_tab, cfg.market_limit)
    except _CLIENT_ERRORS as e:
        logger.error(f"[DISCOVER] {e}")
        return EXIT_FAILED

    if not tokens:
        logger.error("[DISCOVER] No tokens returned from market API")
        return EXIT_FAILED
    logger.info(f"[DISCOVER] Found {len(tokens)} tokens")

    target = select_target(tokens)
    if target is None:
        logger.error("[DISCOVER] No valid token found")
        return EXIT_FAILED
    logger.info(f"[TARGET] ${target.symbol or '?'} ({target.mint[:16]}...)")

    try:
        dp = await client.get_datapoint(target.mint)
    except _CLIENT_ERRORS as e:
        logger.error(f"[SNAPSHOT] {e}")
        return EXIT_FAILED
    _log_datapoint(dp)

    result = analyze(dp)
    _log_analysis(result)

    try:
        submitted = await client.submit_analysis(build_submission(target.mint, result))
    except _CLIENT_ERRORS as e:
        logger.error(f"[SUBMIT] {e}")
        return EXIT_FAILED

    if not submitted.ok:
        logger.error(f"[SUBMIT] {submitted.error or 'Unknown error'}")
        if submitted.error and "cooldown" in submitted.error:
            logger.info("Try again in 60 seconds or analyze a different token.")
        return EXIT_FAILED

    validated = "yes (within 15%)" if submitted.validated else "no"
    logger.success(
        f"[SUBMIT] Analysis accepted: +{submitted.xpEarned} XP (total {submitted.xpTotal}), "
        f"validated={validated}, deviation={submitted.deviationPct}%, "
        f"id={submitted.analysisId or '-'}"
    )
    if submitted.warning:
        logger.warning(f"[SUBMIT] {submitted.warning}")
    return EXIT_OK


async def run_agent(cfg: Settings) -> int:
    """Run the agent once; returns the process exit code."""
    if not _has_api_key(cfg):
        return await register_key(cfg)

    client = _make_client(cfg, cfg.pump_studio_api_key)
    logger.info(f"[AUTH] API key loaded: {cfg.pump_studio_api_key[:12]}...")
    try:
        await ensure_profile(client, cfg)
        return await analyze_and_submit(client, cfg)
    finally:
        await client.close()
