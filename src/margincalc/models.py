"""Pydantic request/response models for the calculator surfaces."""

from typing import Optional, Union

from pydantic import BaseModel, Field, StrictBool, StrictFloat, StrictInt, StrictStr

from margincalc.normalizer import DiscountMode

# Strict members keep JSON booleans as booleans so the normalizer zeroes them.
FieldValue = Union[StrictBool, StrictInt, StrictFloat, StrictStr, None]


class PricingRequest(BaseModel):
    """Raw calculator form values.

    Numeric fields accept numbers or strings and may be omitted; anything
    that is not a finite number, booleans included, is treated as zero. An
    omitted target margin uses the configured default instead.
    """

    list_price: FieldValue = Field(None, description="Selling price before discount")
    unit_cost: FieldValue = Field(None, description="Cost of goods per unit")
    discount_mode: DiscountMode = Field(
        DiscountMode.PERCENTAGE, description="How discount_value is interpreted"
    )
    discount_value: FieldValue = Field(None, description="Discount percent or amount")
    target_margin_pct: FieldValue = Field(None, description="Desired margin in percent")
    language: Optional[str] = Field(None, description="Label language (en, bm)")


class NormalizedInputsResponse(BaseModel):
    """Inputs after normalization."""

    list_price: float
    unit_cost: float
    discount_mode: DiscountMode
    discount_value: float
    target_margin_pct: float


class ComputedResult(BaseModel):
    """Numeric results; margin and markup are fractions."""

    net_price: float
    gross_profit_per_unit: float
    margin_pct: float
    markup_pct: Optional[float] = Field(
        ..., description="Null when profit over cost overflows a float"
    )
    price_for_target_margin: Optional[float] = Field(
        ..., description="Null when no finite price reaches the target"
    )


class DisplayResult(BaseModel):
    """Results rendered for display."""

    net_price: str
    gross_profit_per_unit: str
    margin_pct: str
    markup_pct: str
    price_for_target_margin: str


class PricingResponse(BaseModel):
    """Response payload for the calculate endpoint and CLI JSON output."""

    language: str
    currency_symbol: str
    currency_code: str
    inputs: NormalizedInputsResponse
    result: ComputedResult
    display: DisplayResult
    labels: dict[str, str]
