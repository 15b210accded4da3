"""Unit pricing and margin formulas."""

import math
from dataclasses import dataclass

from margincalc.normalizer import (
    DiscountMode,
    NormalizedInputs,
    RawInputs,
    normalize,
    pct_to_fraction,
)


@dataclass(frozen=True)
class PricingResult:
    """Computed pricing for a single product.

    ``margin_pct`` and ``markup_pct`` are fractions (0.25 means 25%).
    ``price_for_target_margin`` is ``math.inf`` when no finite price
    reaches the target.
    """

    net_price: float
    gross_profit_per_unit: float
    margin_pct: float
    markup_pct: float
    price_for_target_margin: float


def _discount_amount(inputs: NormalizedInputs) -> float:
    if inputs.discount_mode is DiscountMode.AMOUNT:
        return min(inputs.list_price, max(0.0, inputs.discount_value))
    return inputs.list_price * pct_to_fraction(inputs.discount_value)


def price_for_target_margin(unit_cost: float, target_margin_pct: float) -> float:
    """Solve ``(price - cost) / price = target`` for price at zero discount."""
    target = pct_to_fraction(target_margin_pct)
    if target >= 1 or unit_cost <= 0:
        return math.inf
    return unit_cost / (1 - target)


def compute_pricing(inputs: NormalizedInputs) -> PricingResult:
    """Compute pricing metrics. Total over normalized inputs; never raises."""
    list_price = inputs.list_price
    unit_cost = inputs.unit_cost

    total_discount = min(list_price, _discount_amount(inputs))
    net_price = max(0.0, list_price - total_discount)
    # Losses are floored rather than reported as negative profit.
    gross_profit = max(0.0, net_price - unit_cost)

    margin = gross_profit / net_price if net_price > 0 else 0.0
    markup = gross_profit / unit_cost if unit_cost > 0 else 0.0

    return PricingResult(
        net_price=net_price,
        gross_profit_per_unit=gross_profit,
        margin_pct=margin,
        markup_pct=markup,
        price_for_target_margin=price_for_target_margin(
            unit_cost, inputs.target_margin_pct
        ),
    )


def calculate(raw: RawInputs) -> PricingResult:
    """Normalize raw form values and compute pricing in one step."""
    return compute_pricing(normalize(raw))
