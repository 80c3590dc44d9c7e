"""Risk factor detection and risk level derivation.

Factors come from an ordered rule table: each rule is an independent
predicate over the DataPoint and the top-10 holder share, and contributes at
most one tag. Order matters: deduplication keeps first occurrence and the
result is capped at MAX_RISK_FACTORS.
"""

from collections.abc import Callable
from dataclasses import dataclass

from studio_agent.analyzer.labels import safe
from studio_agent.models.datapoint import DataPoint
from studio_agent.models.quant import (
    CRITICAL_FACTORS,
    NEGATIVE_FACTORS,
    RiskFactor,
    RiskLevel,
)

MAX_RISK_FACTORS = 8
LOW_LIQUIDITY_USD = 50_000


@dataclass(frozen=True)
class RiskRule:
    """A tag that is emitted when its check holds."""

    tag: RiskFactor
    description: str
    check: Callable[[DataPoint, float], bool]


def _single_holder_majority(dp: DataPoint, _top10: float) -> bool:
    if not dp.topHolders:
        return False
    return safe(dp.topHolders[0].pct) > 50


def _rapid_sell_off(dp: DataPoint, _top10: float) -> bool:
    buys = safe(dp.buys24h)
    sells = safe(dp.sells24h)
    return sells > buys * 2 and sells > 20


def _organic_volume(dp: DataPoint, _top10: float) -> bool:
    buys = safe(dp.buys24h)
    sells = safe(dp.sells24h)
    return safe(dp.volume24h) > 50_000 and buys > sells * 0.8


RISK_RULES: tuple[RiskRule, ...] = (
    # --- Negative signals ---
    RiskRule(
        RiskFactor.LOW_LIQUIDITY, "liquidity < $50K",
        lambda dp, _: safe(dp.liquidity) < LOW_LIQUIDITY_USD,
    ),
    RiskRule(
        RiskFactor.WHALE_DOMINANCE, "top 10 hold > 80%",
        lambda _, top10: top10 > 80,
    ),
    RiskRule(
        RiskFactor.HIGH_CONCENTRATION, "top 10 hold 50-80%",
        lambda _, top10: 50 < top10 <= 80,
    ),
    RiskRule(
        RiskFactor.CREATOR_HOLDS_MAJORITY, "creator holds > 30%",
        lambda dp, _: dp.creatorHolding is not None and dp.creatorHolding > 30,
    ),
    RiskRule(
        RiskFactor.SINGLE_HOLDER_MAJORITY, "largest holder > 50%",
        _single_holder_majority,
    ),
    RiskRule(
        RiskFactor.BONDING_CURVE_RISK, "bonding curve < 30% complete",
        lambda dp, _: not dp.bondingComplete and safe(dp.bondingProgress) < 30,
    ),
    RiskRule(
        RiskFactor.NO_SOCIAL_PRESENCE, "no website, twitter or telegram",
        lambda dp, _: not dp.website and not dp.twitter and not dp.telegram,
    ),
    RiskRule(
        RiskFactor.NO_WEBSITE, "no website",
        lambda dp, _: not dp.website,
    ),
    RiskRule(
        RiskFactor.DEV_WALLET_ACTIVE, "snipers hold > 20%",
        lambda dp, _: dp.snipersHolding is not None and dp.snipersHolding > 20,
    ),
    RiskRule(
        RiskFactor.WASH_TRADING, "insiders hold > 15%",
        lambda dp, _: dp.insidersHolding is not None and dp.insidersHolding > 15,
    ),
    RiskRule(
        RiskFactor.RAPID_SELL_OFF, "sells > 2x buys (and > 20 sells)",
        _rapid_sell_off,
    ),
    RiskRule(
        RiskFactor.DEAD_VOLUME, "24h volume < $1K with > 100 holders",
        lambda dp, _: safe(dp.volume24h) < 1000 and safe(dp.holderCount) > 100,
    ),
    RiskRule(
        RiskFactor.DECLINING_HOLDERS, "price down > 20% in 24h",
        lambda dp, _: dp.priceChange24h is not None and dp.priceChange24h < -20,
    ),
    # --- Positive signals ---
    RiskRule(
        RiskFactor.HEALTHY_DISTRIBUTION, "top 10 hold <= 30% with > 200 holders",
        lambda dp, top10: top10 <= 30 and safe(dp.holderCount) > 200,
    ),
    RiskRule(
        RiskFactor.VERIFIED_SOCIALS, "twitter or telegram linked",
        lambda dp, _: bool(dp.twitter or dp.telegram),
    ),
    RiskRule(
        RiskFactor.ORGANIC_VOLUME, "24h volume > $50K with buys > 0.8x sells",
        _organic_volume,
    ),
    RiskRule(
        RiskFactor.GROWING_HOLDERS, "> 500 holders",
        lambda dp, _: safe(dp.holderCount) > 500,
    ),
    RiskRule(
        RiskFactor.STRONG_COMMUNITY, "twitter linked",
        lambda dp, _: bool(dp.twitter),
    ),
)


def compute_risk_factors(
    dp: DataPoint,
    top10_pct: float,
    *,
    rules: tuple[RiskRule, ...] = RISK_RULES,
) -> tuple[RiskFactor, ...]:
    """Evaluate the rule table; always returns 1..MAX_RISK_FACTORS unique tags."""
    fired = [rule.tag for rule in rules if rule.check(dp, top10_pct)]

    # first occurrence wins
    factors = list(dict.fromkeys(fired))
    if not factors:
        if safe(dp.liquidity) >= LOW_LIQUIDITY_USD:
            factors.append(RiskFactor.ORGANIC_VOLUME)
        else:
            factors.append(RiskFactor.LOW_LIQUIDITY)
    return tuple(factors[:MAX_RISK_FACTORS])


def negative_factors(factors: tuple[RiskFactor, ...]) -> list[RiskFactor]:
    return [f for f in factors if f in NEGATIVE_FACTORS]


def compute_risk_level(factors: tuple[RiskFactor, ...], buy_pressure: int) -> RiskLevel:
    """Critical tag or 5+ negatives -> critical; 3+ or weak buying -> high; any -> medium."""
    neg_count = len(negative_factors(factors))
    has_critical = any(f in CRITICAL_FACTORS for f in factors)

    if has_critical or neg_count >= 5:
        return RiskLevel.CRITICAL
    if neg_count >= 3 or buy_pressure < 25:
        return RiskLevel.HIGH
    if neg_count >= 1:
        return RiskLevel.MEDIUM
    return RiskLevel.LOW
