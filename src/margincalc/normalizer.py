"""Coercion of raw form values into safe numeric pricing inputs."""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

RawNumber = Union[float, int, str, None]


class DiscountMode(str, Enum):
    """How the discount value is interpreted."""

    PERCENTAGE = "pct"
    AMOUNT = "amount"


_MODE_ALIASES = {
    "pct": DiscountMode.PERCENTAGE,
    "percent": DiscountMode.PERCENTAGE,
    "percentage": DiscountMode.PERCENTAGE,
    "%": DiscountMode.PERCENTAGE,
    "amount": DiscountMode.AMOUNT,
    "amt": DiscountMode.AMOUNT,
}


@dataclass(frozen=True)
class RawInputs:
    """Field values exactly as the form supplied them."""

    list_price: RawNumber = None
    unit_cost: RawNumber = None
    discount_mode: Any = DiscountMode.PERCENTAGE
    discount_value: RawNumber = None
    target_margin_pct: RawNumber = None


@dataclass(frozen=True)
class NormalizedInputs:
    """Finite inputs ready for the pricing engine.

    ``list_price`` and ``unit_cost`` are floored at zero. ``discount_value``
    and ``target_margin_pct`` are only made finite; their clamping happens
    inside the engine.
    """

    list_price: float
    unit_cost: float
    discount_mode: DiscountMode
    discount_value: float
    target_margin_pct: float


def to_number(raw: Any, fallback: float = 0.0) -> float:
    """Return ``raw`` as a finite float, or ``fallback`` when it is not one."""
    if raw is None or isinstance(raw, bool):
        return fallback
    if isinstance(raw, str):
        raw = raw.strip()
        if not raw:
            return fallback
    try:
        value = float(raw)
    except (TypeError, ValueError, OverflowError):
        return fallback
    return value if math.isfinite(value) else fallback


def clamp_fraction(value: float) -> float:
    """Clamp ``value`` to the closed interval [0, 1]."""
    return max(0.0, min(1.0, value))


def pct_to_fraction(pct: float) -> float:
    return clamp_fraction(pct / 100)


def fraction_to_pct(fraction: float) -> float:
    # Not clamped: markup above 100% is reported as-is.
    return fraction * 100 if math.isfinite(fraction) else 0.0


def parse_discount_mode(raw: Any) -> DiscountMode:
    """Resolve a discount mode, defaulting to percentage for unknown values."""
    if isinstance(raw, DiscountMode):
        return raw
    if isinstance(raw, str):
        return _MODE_ALIASES.get(raw.strip().lower(), DiscountMode.PERCENTAGE)
    return DiscountMode.PERCENTAGE


def normalize(raw: RawInputs) -> NormalizedInputs:
    """Normalize a raw input snapshot. Never raises."""
    return NormalizedInputs(
        list_price=max(0.0, to_number(raw.list_price)),
        unit_cost=max(0.0, to_number(raw.unit_cost)),
        discount_mode=parse_discount_mode(raw.discount_mode),
        discount_value=to_number(raw.discount_value),
        target_margin_pct=to_number(raw.target_margin_pct),
    )
