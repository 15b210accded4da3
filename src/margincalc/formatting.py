"""Display formatting for pricing results."""

import math
from dataclasses import dataclass

from margincalc.normalizer import fraction_to_pct
from margincalc.pricing import PricingResult

NOT_APPLICABLE = "N/A"
MONEY_FRACTION_DIGITS = 2
PERCENT_FRACTION_DIGITS = 4


@dataclass(frozen=True)
class FormattedResult:
    """Display strings for a pricing result."""

    net_price: str
    gross_profit_per_unit: str
    margin_pct: str
    markup_pct: str
    price_for_target_margin: str


def format_number(value: float, max_fraction_digits: int) -> str:
    """Group thousands and keep at most ``max_fraction_digits`` decimals.

    Trailing zeros are dropped, so ``90.0`` renders as ``"90"`` and
    ``85.7142`` with two digits renders as ``"85.71"``.
    """
    rounded = round(value, max_fraction_digits) + 0.0  # drops -0.0
    text = f"{rounded:,.{max_fraction_digits}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def format_money(symbol: str, value: float) -> str:
    if not math.isfinite(value):
        return NOT_APPLICABLE
    return f"{symbol}{format_number(value, MONEY_FRACTION_DIGITS)}"


def format_percent(fraction: float) -> str:
    if not math.isfinite(fraction):
        return NOT_APPLICABLE
    return f"{format_number(fraction_to_pct(fraction), PERCENT_FRACTION_DIGITS)}%"


def format_result(result: PricingResult, currency_symbol: str) -> FormattedResult:
    """Render every result field the way the calculator displays it."""
    return FormattedResult(
        net_price=format_money(currency_symbol, result.net_price),
        gross_profit_per_unit=format_money(currency_symbol, result.gross_profit_per_unit),
        margin_pct=format_percent(result.margin_pct),
        markup_pct=format_percent(result.markup_pct),
        price_for_target_margin=format_money(
            currency_symbol, result.price_for_target_margin
        ),
    )
