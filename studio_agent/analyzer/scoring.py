"""Composite 0-100 score and sentiment from already-computed labels."""

from studio_agent.analyzer.labels import clamp, round_half_up
from studio_agent.models.quant import (
    LiquidityDepth,
    RiskLevel,
    Sentiment,
    TrendDirection,
)

BASE_SCORE = 50

TREND_ADJUSTMENT: dict[TrendDirection, int] = {
    TrendDirection.UP: 10,
    TrendDirection.DOWN: -10,
    TrendDirection.REVERSAL: -5,
    TrendDirection.SIDEWAYS: 0,
}

RISK_ADJUSTMENT: dict[RiskLevel, int] = {
    RiskLevel.CRITICAL: -20,
    RiskLevel.HIGH: -10,
    RiskLevel.MEDIUM: 0,
    RiskLevel.LOW: 10,
}

LIQUIDITY_ADJUSTMENT: dict[LiquidityDepth, int] = {
    LiquidityDepth.DEEP: 5,
    LiquidityDepth.MODERATE: 0,
    LiquidityDepth.SHALLOW: 0,
    LiquidityDepth.DRY: -10,
}

HIGH_VOLATILITY = 70


def compute_score(
    buy_pressure: int,
    volatility_score: int,
    risk_level: RiskLevel,
    trend_direction: TrendDirection,
    liquidity_depth: LiquidityDepth,
) -> int:
    """Blend labels into a 0-100 score.

    Scoring breakdown:
    - Buy pressure: -25 to +25 (half the distance from neutral 50)
    - Trend: up +10, down -10, reversal -5
    - Volatility: -5 above 70 (less certain)
    - Risk level: critical -20, high -10, low +10
    - Liquidity: deep +5, dry -10
    """
    score: float = BASE_SCORE
    score += (buy_pressure - 50) * 0.5
    score += TREND_ADJUSTMENT[trend_direction]
    if volatility_score > HIGH_VOLATILITY:
        score -= 5
    score += RISK_ADJUSTMENT[risk_level]
    score += LIQUIDITY_ADJUSTMENT[liquidity_depth]
    return int(clamp(round_half_up(score), 0, 100))


def compute_sentiment(score: int, risk_level: RiskLevel) -> Sentiment:
    # High risk caps sentiment at neutral even with a strong score
    if risk_level == RiskLevel.CRITICAL or score < 35:
        return Sentiment.BEARISH
    if score > 65 and risk_level != RiskLevel.HIGH:
        return Sentiment.BULLISH
    return Sentiment.NEUTRAL
