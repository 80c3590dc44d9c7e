"""Numeric label computations over a single DataPoint.

Every function here is total: absent or non-finite inputs fall back to a
fixed value and each threshold ladder ends in an unconditional branch.
"""

import math

from studio_agent.models.datapoint import DataPoint
from studio_agent.models.quant import (
    HolderConcentration,
    LiquidityDepth,
    TrendDirection,
    VolumeProfile,
)

TOP_HOLDERS_WINDOW = 10


def safe(value: float | None, fallback: float = 0) -> float:
    """Return value if it is a finite number, else fallback."""
    if value is None or not math.isfinite(value):
        return fallback
    return value


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def round_half_up(value: float) -> float:
    """Round .5 toward positive infinity (not banker's rounding).

    Non-finite values pass through unchanged so callers can clamp them.
    """
    if not math.isfinite(value):
        return value
    return math.floor(value + 0.5)


def compute_top10_pct(dp: DataPoint) -> float:
    """Share of supply held by the ten largest wallets.

    Prefers the precomputed aggregate; falls back to summing the ranked list.
    """
    if dp.top10Holding is not None and math.isfinite(dp.top10Holding):
        return dp.top10Holding
    if dp.topHolders:
        return sum(safe(h.pct) for h in dp.topHolders[:TOP_HOLDERS_WINDOW])
    return 0.0


def compute_buy_pressure(dp: DataPoint) -> int:
    """buys / (buys + sells + 1) as a 0-100 integer, 50 when there is no activity.

    The +1 damps the ratio for near-zero activity.
    """
    buys = safe(dp.buys24h)
    sells = safe(dp.sells24h)
    if buys + sells == 0:
        return 50
    denominator = buys + sells + 1
    # Only reachable with negative counts.
    if denominator <= 0:
        return 0
    return int(clamp(round_half_up(buys / denominator * 100), 0, 100))


def _volume_mcap_ratio(dp: DataPoint) -> float | None:
    mcap = safe(dp.marketCap, 1)
    if mcap <= 0:
        return None
    return safe(dp.volume24h) / mcap


def compute_volatility_score(dp: DataPoint) -> int:
    """Map 24h volume / market cap onto 10-95.

    ratio < 0.05    -> low      (10-25)
    0.05 - 0.2      -> moderate (25-50)
    0.2 - 0.5       -> high     (50-75)
    >= 0.5          -> extreme  (75-95)
    """
    ratio = _volume_mcap_ratio(dp)
    if ratio is None:
        return 50

    if ratio < 0.05:
        return int(clamp(round_half_up(10 + ratio * 300), 10, 25))
    if ratio < 0.2:
        return int(clamp(round_half_up(25 + (ratio - 0.05) * 166), 25, 50))
    if ratio < 0.5:
        return int(clamp(round_half_up(50 + (ratio - 0.2) * 83), 50, 75))
    return int(clamp(round_half_up(75 + (ratio - 0.5) * 40), 75, 95))


def compute_liquidity_depth(dp: DataPoint) -> LiquidityDepth:
    liq = safe(dp.liquidity)
    if liq >= 1_000_000:
        return LiquidityDepth.DEEP
    if liq >= 250_000:
        return LiquidityDepth.MODERATE
    if liq >= 50_000:
        return LiquidityDepth.SHALLOW
    return LiquidityDepth.DRY


def compute_holder_concentration(top10_pct: float) -> HolderConcentration:
    if top10_pct > 80:
        return HolderConcentration.WHALE_DOMINATED
    if top10_pct > 50:
        return HolderConcentration.CONCENTRATED
    if top10_pct > 20:
        return HolderConcentration.MODERATE
    return HolderConcentration.DISTRIBUTED


def compute_trend_direction(dp: DataPoint) -> TrendDirection:
    """Blend 1h/24h price change; fall back to the buy/sell ratio without price data."""
    if dp.priceChange1h is not None or dp.priceChange24h is not None:
        ch1h = safe(dp.priceChange1h)
        ch24h = safe(dp.priceChange24h)

        # 1h and 24h disagree strongly
        if ch1h > 5 and ch24h < -10:
            return TrendDirection.REVERSAL
        if ch1h < -5 and ch24h > 10:
            return TrendDirection.REVERSAL

        combined = ch1h * 0.6 + ch24h * 0.4
        if combined > 3:
            return TrendDirection.UP
        if combined < -3:
            return TrendDirection.DOWN
        return TrendDirection.SIDEWAYS

    buys = safe(dp.buys24h)
    sells = safe(dp.sells24h)
    # No activity counts as ratio 0, which lands in the "down" bucket.
    ratio = buys / (buys + sells) if buys + sells > 0 else 0.0
    if ratio > 0.6:
        return TrendDirection.UP
    if ratio < 0.4:
        return TrendDirection.DOWN
    return TrendDirection.SIDEWAYS


def compute_volume_profile(dp: DataPoint) -> VolumeProfile:
    ratio = _volume_mcap_ratio(dp)
    if ratio is None:
        return VolumeProfile.DEAD
    if ratio > 0.5:
        return VolumeProfile.SURGING
    if ratio > 0.15:
        return VolumeProfile.RISING
    if ratio > 0.03:
        return VolumeProfile.STABLE
    if ratio > 0.005:
        return VolumeProfile.DECLINING
    return VolumeProfile.DEAD
