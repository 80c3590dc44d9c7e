"""Pydantic models for Pump Studio API responses and the submission payload."""

from typing import Literal

from pydantic import BaseModel

from studio_agent.models.datapoint import DataPoint
from studio_agent.models.quant import AnalysisResult

MarketTab = Literal["all", "live", "new", "graduated"]


class RegisteredKey(BaseModel):
    key: str
    type: str = ""
    rateLimit: int | None = None

    model_config = {"extra": "ignore"}


class RegisterResponse(BaseModel):
    """Response from POST /api/v1/keys/register."""

    ok: bool = False
    data: RegisteredKey | None = None
    important: str | None = None
    error: str | None = None

    model_config = {"extra": "ignore"}


class AgentProfile(BaseModel):
    name: str
    description: str | None = None
    avatarUrl: str | None = None
    twitterHandle: str | None = None
    website: str | None = None
    createdAt: int | None = None
    updatedAt: int | None = None

    model_config = {"extra": "ignore"}


class ProfileResponse(BaseModel):
    ok: bool = False
    profile: AgentProfile | None = None
    hint: str | None = None
    error: str | None = None

    model_config = {"extra": "ignore"}


class MarketToken(BaseModel):
    """Single token from GET /api/v1/market (pump.fun coin shape)."""

    mint: str = ""
    name: str | None = None
    symbol: str | None = None
    description: str | None = None
    image_uri: str | None = None
    usd_market_cap: float | None = None
    market_cap: float | None = None
    created_timestamp: int | None = None
    is_currently_live: bool | None = None
    complete: bool | None = None

    model_config = {"extra": "ignore"}


class MarketResponse(BaseModel):
    ok: bool = False
    data: list[MarketToken] | None = None
    error: str | None = None

    model_config = {"extra": "ignore"}


class DataPointResponse(BaseModel):
    ok: bool = False
    data: DataPoint | None = None
    error: str | None = None

    model_config = {"extra": "ignore"}


class TokenContext(BaseModel):
    """Bring-your-own-LLM context for a token (GET /api/v1/chat/context)."""

    systemPrompt: str = ""
    context: str = ""
    mint: str
    tokenName: str | None = None
    tokenSymbol: str | None = None
    analysisSchema: str = ""

    model_config = {"extra": "ignore"}


class ContextResponse(BaseModel):
    ok: bool = False
    data: TokenContext | None = None
    error: str | None = None

    model_config = {"extra": "ignore"}


class SubmitResult(BaseModel):
    """Response from POST /api/v1/analysis/submit."""

    ok: bool = False
    xpEarned: int | None = None
    xpTotal: int | None = None
    analysisId: str | None = None
    validated: bool | None = None
    deviationPct: float | None = None
    warning: str | None = None
    error: str | None = None

    model_config = {"extra": "ignore"}


class SnapshotPayload(BaseModel):
    priceUsd: float
    marketCap: float
    volume24h: float
    liquidity: float
    holderCount: float
    top10HolderPct: float
    buys24h: float
    sells24h: float
    bondingProgress: float
    snapshotAt: int


class QuantPayload(BaseModel):
    riskLevel: str
    riskFactors: list[str]
    buyPressure: int
    volatilityScore: int
    liquidityDepth: str
    holderConcentration: str
    trendDirection: str
    volumeProfile: str


class SubmissionPayload(BaseModel):
    mint: str
    sentiment: str
    score: int
    summary: str
    snapshot: SnapshotPayload
    quant: QuantPayload


def build_submission(mint: str, result: AnalysisResult) -> SubmissionPayload:
    """Convert an analyzer result into the camelCase submission schema."""
    snap = result.snapshot
    quant = result.quant
    return SubmissionPayload(
        mint=mint,
        sentiment=str(result.sentiment),
        score=result.score,
        summary=result.summary,
        snapshot=SnapshotPayload(
            priceUsd=snap.price_usd,
            marketCap=snap.market_cap,
            volume24h=snap.volume_24h,
            liquidity=snap.liquidity,
            holderCount=snap.holder_count,
            top10HolderPct=snap.top10_holder_pct,
            buys24h=snap.buys_24h,
            sells24h=snap.sells_24h,
            bondingProgress=snap.bonding_progress,
            snapshotAt=snap.snapshot_at,
        ),
        quant=QuantPayload(
            riskLevel=str(quant.risk_level),
            riskFactors=[str(f) for f in quant.risk_factors],
            buyPressure=quant.buy_pressure,
            volatilityScore=quant.volatility_score,
            liquidityDepth=str(quant.liquidity_depth),
            holderConcentration=str(quant.holder_concentration),
            trendDirection=str(quant.trend_direction),
            volumeProfile=str(quant.volume_profile),
        ),
    )
