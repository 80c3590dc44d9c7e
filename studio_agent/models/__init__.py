from studio_agent.models.datapoint import DataPoint, RecentTrade, TopHolder
from studio_agent.models.quant import (
    AnalysisResult,
    HolderConcentration,
    LiquidityDepth,
    Quant,
    RiskFactor,
    RiskLevel,
    Sentiment,
    Snapshot,
    TrendDirection,
    VolumeProfile,
)

__all__ = [
    "DataPoint",
    "TopHolder",
    "RecentTrade",
    "AnalysisResult",
    "Snapshot",
    "Quant",
    "Sentiment",
    "RiskLevel",
    "RiskFactor",
    "LiquidityDepth",
    "HolderConcentration",
    "TrendDirection",
    "VolumeProfile",
]
