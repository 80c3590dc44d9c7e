"""Analyzer output types: closed label enums and the result records."""

from dataclasses import dataclass
from enum import StrEnum


class Sentiment(StrEnum):
    BULLISH = "bullish"
    BEARISH = "bearish"
    NEUTRAL = "neutral"


class RiskLevel(StrEnum):
    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class LiquidityDepth(StrEnum):
    DEEP = "deep"
    MODERATE = "moderate"
    SHALLOW = "shallow"
    DRY = "dry"


class HolderConcentration(StrEnum):
    DISTRIBUTED = "distributed"
    MODERATE = "moderate"
    CONCENTRATED = "concentrated"
    WHALE_DOMINATED = "whale_dominated"


class TrendDirection(StrEnum):
    UP = "up"
    DOWN = "down"
    SIDEWAYS = "sideways"
    REVERSAL = "reversal"


class VolumeProfile(StrEnum):
    SURGING = "surging"
    RISING = "rising"
    STABLE = "stable"
    DECLINING = "declining"
    DEAD = "dead"


class RiskFactor(StrEnum):
    """Fixed 28-tag vocabulary accepted by the submission schema."""

    # Negative
    WHALE_DOMINANCE = "whale_dominance"
    CREATOR_HOLDS_MAJORITY = "creator_holds_majority"
    LOW_LIQUIDITY = "low_liquidity"
    NO_LIQUIDITY_LOCK = "no_liquidity_lock"
    HIGH_CONCENTRATION = "high_concentration"
    RUG_PATTERN = "rug_pattern"
    HONEYPOT_RISK = "honeypot_risk"
    WASH_TRADING = "wash_trading"
    BONDING_CURVE_RISK = "bonding_curve_risk"
    RAPID_SELL_OFF = "rapid_sell_off"
    NO_SOCIAL_PRESENCE = "no_social_presence"
    FAKE_VOLUME = "fake_volume"
    SUPPLY_MANIPULATION = "supply_manipulation"
    DEV_WALLET_ACTIVE = "dev_wallet_active"
    COPY_TOKEN = "copy_token"
    NO_WEBSITE = "no_website"
    NEW_DEPLOYER = "new_deployer"
    SINGLE_HOLDER_MAJORITY = "single_holder_majority"
    DECLINING_HOLDERS = "declining_holders"
    DEAD_VOLUME = "dead_volume"

    # Positive
    HEALTHY_DISTRIBUTION = "healthy_distribution"
    STRONG_COMMUNITY = "strong_community"
    ORGANIC_VOLUME = "organic_volume"
    LOCKED_LIQUIDITY = "locked_liquidity"
    VERIFIED_SOCIALS = "verified_socials"
    ACTIVE_DEVELOPMENT = "active_development"
    GROWING_HOLDERS = "growing_holders"
    SMART_MONEY_INFLOW = "smart_money_inflow"


POSITIVE_FACTORS: frozenset[RiskFactor] = frozenset({
    RiskFactor.HEALTHY_DISTRIBUTION,
    RiskFactor.STRONG_COMMUNITY,
    RiskFactor.ORGANIC_VOLUME,
    RiskFactor.LOCKED_LIQUIDITY,
    RiskFactor.VERIFIED_SOCIALS,
    RiskFactor.ACTIVE_DEVELOPMENT,
    RiskFactor.GROWING_HOLDERS,
    RiskFactor.SMART_MONEY_INFLOW,
})

NEGATIVE_FACTORS: frozenset[RiskFactor] = frozenset(RiskFactor) - POSITIVE_FACTORS

CRITICAL_FACTORS: frozenset[RiskFactor] = frozenset({
    RiskFactor.RUG_PATTERN,
    RiskFactor.HONEYPOT_RISK,
    RiskFactor.SINGLE_HOLDER_MAJORITY,
})


@dataclass(frozen=True)
class Snapshot:
    """Numeric fields echoed from the DataPoint for server-side verification."""

    price_usd: float
    market_cap: float
    volume_24h: float
    liquidity: float
    holder_count: float
    top10_holder_pct: float
    buys_24h: float
    sells_24h: float
    bonding_progress: float
    snapshot_at: int  # epoch ms


@dataclass(frozen=True)
class Quant:
    """Structured labels derived from one DataPoint."""

    risk_level: RiskLevel
    risk_factors: tuple[RiskFactor, ...]
    buy_pressure: int  # 0-100
    volatility_score: int  # 10-95
    liquidity_depth: LiquidityDepth
    holder_concentration: HolderConcentration
    trend_direction: TrendDirection
    volume_profile: VolumeProfile


@dataclass(frozen=True)
class AnalysisResult:
    sentiment: Sentiment
    score: int  # 0-100
    summary: str
    snapshot: Snapshot
    quant: Quant
