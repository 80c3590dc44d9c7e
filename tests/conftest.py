"""Shared test fixtures."""

import pytest

from studio_agent.models.datapoint import DataPoint

NOW_MS = 1_700_000_000_000


@pytest.fixture
def now_ms() -> int:
    return NOW_MS


@pytest.fixture
def healthy_datapoint() -> DataPoint:
    """Deep-liquidity, well-distributed graduated token with a twitter link."""
    return DataPoint(
        mint="HeaLthyMint1111111111111111111111111111pump",
        name="Healthy",
        symbol="HLT",
        buys24h=80,
        sells24h=20,
        liquidity=2_000_000,
        marketCap=5_000_000,
        volume24h=1_000_000,
        top10Holding=15,
        holderCount=600,
        twitter="x",
        website=None,
        priceChange1h=4,
        priceChange24h=8,
        bondingComplete=True,
        priceUsd=0.005,
        bondingProgress=100,
        snapshotAt=NOW_MS - 60_000,
    )
