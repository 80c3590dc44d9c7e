"""DataPoint -> AnalysisResult.

Pure function: no IO, no shared state. Sub-computations run in a fixed order
because risk level, score, sentiment and summary consume earlier labels.
"""

import time

from loguru import logger

from studio_agent.analyzer.labels import (
    compute_buy_pressure,
    compute_holder_concentration,
    compute_liquidity_depth,
    compute_top10_pct,
    compute_trend_direction,
    compute_volatility_score,
    compute_volume_profile,
    round_half_up,
    safe,
)
from studio_agent.analyzer.risk_factors import compute_risk_factors, compute_risk_level
from studio_agent.analyzer.scoring import compute_score, compute_sentiment
from studio_agent.analyzer.summary import generate_summary
from studio_agent.models.datapoint import DataPoint
from studio_agent.models.quant import AnalysisResult, Quant, Snapshot

# Snapshots older than this are re-stamped with the analysis time
SNAPSHOT_MAX_AGE_MS = 300_000


def _now_ms() -> int:
    return int(time.time() * 1000)


def build_snapshot(dp: DataPoint, top10_pct: float, now_ms: int) -> Snapshot:
    """Echo the 10 verification fields; stale capture times become now_ms."""
    if dp.snapshotAt and now_ms - dp.snapshotAt < SNAPSHOT_MAX_AGE_MS:
        snapshot_at = dp.snapshotAt
    else:
        snapshot_at = now_ms

    return Snapshot(
        price_usd=safe(dp.priceUsd),
        market_cap=safe(dp.marketCap),
        volume_24h=safe(dp.volume24h),
        liquidity=safe(dp.liquidity),
        holder_count=safe(dp.holderCount),
        top10_holder_pct=round_half_up(top10_pct * 10) / 10,
        buys_24h=safe(dp.buys24h),
        sells_24h=safe(dp.sells24h),
        bonding_progress=safe(dp.bondingProgress),
        snapshot_at=snapshot_at,
    )


def analyze(dp: DataPoint, *, now_ms: int | None = None) -> AnalysisResult:
    """Score a DataPoint with deterministic heuristics.

    now_ms pins the analysis time (epoch ms); defaults to the wall clock.
    """
    if now_ms is None:
        now_ms = _now_ms()

    top10_pct = compute_top10_pct(dp)
    snapshot = build_snapshot(dp, top10_pct, now_ms)

    buy_pressure = compute_buy_pressure(dp)
    volatility_score = compute_volatility_score(dp)
    liquidity_depth = compute_liquidity_depth(dp)
    holder_concentration = compute_holder_concentration(top10_pct)
    trend_direction = compute_trend_direction(dp)
    volume_profile = compute_volume_profile(dp)
    risk_factors = compute_risk_factors(dp, top10_pct)
    risk_level = compute_risk_level(risk_factors, buy_pressure)

    quant = Quant(
        risk_level=risk_level,
        risk_factors=risk_factors,
        buy_pressure=buy_pressure,
        volatility_score=volatility_score,
        liquidity_depth=liquidity_depth,
        holder_concentration=holder_concentration,
        trend_direction=trend_direction,
        volume_profile=volume_profile,
    )

    score = compute_score(
        buy_pressure, volatility_score, risk_level, trend_direction, liquidity_depth
    )
    sentiment = compute_sentiment(score, risk_level)
    summary = generate_summary(dp, sentiment, score, quant, top10_pct)

    logger.debug(
        f"[ANALYZE] {dp.mint[:12]}: {sentiment} score={score} risk={risk_level} "
        f"bp={buy_pressure} vol={volatility_score} trend={trend_direction} "
        f"factors={len(risk_factors)}"
    )

    return AnalysisResult(
        sentiment=sentiment,
        score=score,
        summary=summary,
        snapshot=snapshot,
        quant=quant,
    )
