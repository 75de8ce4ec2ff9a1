from __future__ import annotations

from decimal import ROUND_HALF_UP, Context, Decimal

from stock_tracker.schemas.quote import NormalizedQuote, RawQuote

_CENTS = Decimal("0.01")
# wide enough for any finite float (max ~309 integer digits)
_FIXED2_CONTEXT = Context(prec=400)


def format_fixed2(value: float) -> str:
    """Render with two decimals, rounding half away from zero on the exact float value."""
    if value == 0:
        value = 0.0
    return str(Decimal(value).quantize(_CENTS, rounding=ROUND_HALF_UP, context=_FIXED2_CONTEXT))


def format_change_percent(value: float) -> str:
    sign = "+" if value >= 0 else "-"
    return f"{sign}{format_fixed2(abs(value))}%"


def format_volume(value: int) -> str:
    return f"{value:,}"


def synthesize_name(symbol: str) -> str:
    # no company-name lookup is performed upstream
    return f"{symbol} Corporation"


def normalize_quote(raw: RawQuote) -> NormalizedQuote:
    return NormalizedQuote(
        symbol=raw.symbol,
        name=synthesize_name(raw.symbol),
        price=format_fixed2(raw.price),
        change=format_fixed2(raw.change),
        change_percent=format_change_percent(raw.change_percent),
        volume=format_volume(raw.volume),
        high=format_fixed2(raw.high),
        low=format_fixed2(raw.low),
        open=format_fixed2(raw.open),
        last_updated=raw.latest_trading_day,
    )
