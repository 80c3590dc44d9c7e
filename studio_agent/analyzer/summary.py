"""Deterministic natural-language summary of an analysis."""

from studio_agent.analyzer.labels import round_half_up, safe
from studio_agent.analyzer.risk_factors import negative_factors
from studio_agent.models.datapoint import DataPoint
from studio_agent.models.quant import Quant, Sentiment


def _to_fixed(value: float, digits: int) -> str:
    """Fixed-point text with halves rounded away from zero (1.25 -> '1.3')."""
    if value < 0:
        return "-" + _to_fixed(-value, digits)
    scale = 10**digits
    return f"{round_half_up(value * scale) / scale:.{digits}f}"


def format_compact(n: float) -> str:
    """1234567 -> '1.2M'. Values under 1000 render as a whole number."""
    if n >= 1_000_000_000:
        return f"{_to_fixed(n / 1_000_000_000, 1)}B"
    if n >= 1_000_000:
        return f"{_to_fixed(n / 1_000_000, 1)}M"
    if n >= 1_000:
        return f"{_to_fixed(n / 1_000, 1)}K"
    return _to_fixed(n, 0)


def _format_count(n: float) -> str:
    if float(n).is_integer():
        return str(int(n))
    return str(n)


def generate_summary(
    dp: DataPoint,
    sentiment: Sentiment,
    score: int,
    quant: Quant,
    top10_pct: float,
) -> str:
    parts: list[str] = []

    # Price action
    if dp.priceChange1h is not None:
        direction = "up" if dp.priceChange1h >= 0 else "down"
        parts.append(f"Price {direction} {_to_fixed(abs(dp.priceChange1h), 1)}% in the last hour")

    mcap = safe(dp.marketCap)
    if mcap > 0:
        parts.append(
            f"mcap ${format_compact(mcap)} with ${format_compact(safe(dp.volume24h))} 24h volume"
        )

    parts.append(f"top 10 wallets hold {_to_fixed(top10_pct, 1)}% ({quant.holder_concentration})")
    parts.append(f"liquidity {quant.liquidity_depth} at ${format_compact(safe(dp.liquidity))}")

    buys = _format_count(safe(dp.buys24h))
    sells = _format_count(safe(dp.sells24h))
    parts.append(f"{buys} buys vs {sells} sells ({quant.buy_pressure}% buy pressure)")

    risks = negative_factors(quant.risk_factors)
    if risks:
        parts.append(f"risk factors: {', '.join(risks)}")

    if not dp.bondingComplete:
        parts.append(f"bonding curve {_to_fixed(safe(dp.bondingProgress), 0)}% complete")

    return f"{sentiment.upper()} ({score}/100). {'. '.join(parts)}."
