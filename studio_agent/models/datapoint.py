"""Pydantic models for the Pump Studio DataPoint snapshot.

Field names mirror the API payload (camelCase). Every numeric field is
nullable; the analyzer substitutes fallbacks, the model never rejects a null.
"""

from typing import Literal

from pydantic import BaseModel


class TopHolder(BaseModel):
    """Single entry of the ranked top-holders list."""

    address: str = ""
    amount: float | None = None
    pct: float | None = None

    model_config = {"extra": "ignore"}


class RecentTrade(BaseModel):
    tx: str = ""
    type: Literal["buy", "sell"] = "buy"
    sol: float | None = None
    wallet: str = ""
    timestamp: int | None = None

    model_config = {"extra": "ignore"}


class DataPoint(BaseModel):
    """Response payload of /api/v1/datapoint.

    One token at one instant: pricing, market, activity, holders,
    social links and optional keyed-tier wallet analysis.
    """

    # Identity
    mint: str
    name: str = ""
    symbol: str = ""
    description: str | None = None
    imageUrl: str | None = None
    creator: str | None = None

    # Price
    priceUsd: float | None = None
    priceSol: float | None = None
    solPriceUsd: float | None = None
    priceChange1h: float | None = None
    priceChange6h: float | None = None
    priceChange24h: float | None = None

    # Market
    marketCap: float | None = None
    fdv: float | None = None
    totalSupply: float | None = None
    liquidity: float | None = None

    # Volume
    volume1m: float | None = None
    volume1h: float | None = None
    volume6h: float | None = None
    volume24h: float | None = None

    # Activity
    buys24h: float | None = None
    sells24h: float | None = None
    tradeCount: float | None = None
    holderCount: float | None = None
    tradeRate1m: float | None = None
    buySellImbalance1m: float | None = None

    # Bonding curve
    bondingComplete: bool = False
    bondingProgress: float | None = None

    # Streaming
    isLive: bool = False
    streamSource: Literal["pumpfun", "studio", "none"] = "none"
    viewerCount: float | None = None

    # Social
    website: str | None = None
    twitter: str | None = None
    telegram: str | None = None

    # DEX
    dexPaid: bool = False
    dexBoosted: bool = False
    primaryDex: str | None = None

    # Holders (keyed tier)
    topHolders: list[TopHolder] | None = None

    # Wallet analysis (keyed tier), percent of supply
    top10Holding: float | None = None
    snipersHolding: float | None = None
    insidersHolding: float | None = None
    bundleHolding: float | None = None
    freshWalletsHolding: float | None = None
    creatorHolding: float | None = None

    # Trades (keyed tier)
    recentTrades: list[RecentTrade] | None = None

    # Meta
    snapshotAt: int = 0  # epoch ms
    ttl: int | None = None
    version: str = ""

    model_config = {"extra": "ignore"}
