"""Static label tables for the supported display languages."""

from types import MappingProxyType
from typing import Mapping

from pydantic import BaseModel, ConfigDict

from margincalc.exceptions import UnsupportedLanguageError
from margincalc.normalizer import DiscountMode


class ProductFieldLabels(BaseModel):
    """Input field labels."""

    model_config = ConfigDict(frozen=True)

    list_price: str
    unit_cost: str
    discount_template: str
    discount_units: dict[DiscountMode, str]
    discount_toggle: str
    target_margin_pct: str


class ResultLabels(BaseModel):
    """Result card labels."""

    model_config = ConfigDict(frozen=True)

    net_price: str
    gross_profit_per_unit: str
    margin_pct: str
    markup_pct: str
    price_for_target_margin: str


class Translation(BaseModel):
    """All user-facing text for one language."""

    model_config = ConfigDict(frozen=True)

    title: str
    language_label: str
    product_section: str
    product_fields: ProductFieldLabels
    discount_modes: dict[DiscountMode, str]
    results_section: str
    result_labels: ResultLabels
    notes: str
    footer: str


_TRANSLATIONS: dict[str, Translation] = {
    "en": Translation(
        title="Slurp! Margin Calculator",
        language_label="Language",
        product_section="Product Inputs",
        product_fields=ProductFieldLabels(
            list_price="Selling Price",
            unit_cost="Unit Cost",
            discount_template="Discount ({unit})",
            discount_units={DiscountMode.PERCENTAGE: "%", DiscountMode.AMOUNT: "Amount"},
            discount_toggle="Discount Type",
            target_margin_pct="Target Margin (%)",
        ),
        discount_modes={
            DiscountMode.PERCENTAGE: "Percentage",
            DiscountMode.AMOUNT: "Amount",
        },
        results_section="Results",
        result_labels=ResultLabels(
            net_price="Net Price (After Discount)",
            gross_profit_per_unit="Gross Profit / Unit",
            margin_pct="Margin %",
            markup_pct="Markup %",
            price_for_target_margin="Price for Target Margin",
        ),
        notes="Notes: Margin% = Gross Profit ÷ Net Price. Markup% = Gross Profit ÷ COGS.",
        footer=(
            "Built for business owners: quick pricing, reliable margin checks, "
            "and clear targets."
        ),
    ),
    "bm": Translation(
        title="Kalkulator Margin Slurp!",
        language_label="Bahasa",
        product_section="Maklumat Produk",
        product_fields=ProductFieldLabels(
            list_price="Harga Jualan",
            unit_cost="Kos Unit",
            discount_template="Diskaun ({unit})",
            discount_units={DiscountMode.PERCENTAGE: "%", DiscountMode.AMOUNT: "Amaun"},
            discount_toggle="Jenis Diskaun",
            target_margin_pct="Margin Sasaran (%)",
        ),
        discount_modes={
            DiscountMode.PERCENTAGE: "Peratus",
            DiscountMode.AMOUNT: "Amaun",
        },
        results_section="Keputusan",
        result_labels=ResultLabels(
            net_price="Harga Bersih (Selepas Diskaun)",
            gross_profit_per_unit="Untung Kasar / Unit",
            margin_pct="Margin %",
            markup_pct="Markup %",
            price_for_target_margin="Harga Untuk Margin Sasaran",
        ),
        notes="Nota: Margin% = Untung Kasar ÷ Harga Bersih. Markup% = Untung Kasar ÷ COGS.",
        footer=(
            "Dibina untuk pemilik perniagaan: pengiraan pantas, semakan margin "
            "yang tepat dan sasaran yang jelas."
        ),
    ),
}

TRANSLATIONS: Mapping[str, Translation] = MappingProxyType(_TRANSLATIONS)
SUPPORTED_LANGUAGES: tuple[str, ...] = tuple(TRANSLATIONS)


def get_translation(language: str) -> Translation:
    """Return the label table for ``language`` (case-insensitive)."""
    key = language.strip().lower()
    try:
        return TRANSLATIONS[key]
    except KeyError:
        raise UnsupportedLanguageError(language, list(SUPPORTED_LANGUAGES)) from None


def discount_label(translation: Translation, mode: DiscountMode) -> str:
    fields = translation.product_fields
    return fields.discount_template.format(unit=fields.discount_units[mode])
