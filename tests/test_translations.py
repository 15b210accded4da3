"""Tests for label tables and contract errors."""

import pytest
from pydantic import ValidationError

from margincalc.exceptions import ContractError, UnsupportedLanguageError
from margincalc.normalizer import DiscountMode
from margincalc.translations import (
    SUPPORTED_LANGUAGES,
    TRANSLATIONS,
    discount_label,
    get_translation,
)


def test_contract_error_defaults() -> None:
    """ContractError should retain structured API payload fields."""
    err = ContractError(code="bad_input", message="Invalid payload")
    assert err.code == "bad_input"
    assert err.message == "Invalid payload"
    assert err.status_code == 400
    assert err.details == {}


def test_supported_languages() -> None:
    """English and Bahasa Malaysia are supported."""
    assert SUPPORTED_LANGUAGES == ("en", "bm")


def test_get_translation_is_case_insensitive() -> None:
    """Language codes are trimmed and lowercased."""
    assert get_translation(" EN ").title == "Slurp! Margin Calculator"
    assert get_translation("bm").result_labels.net_price == "Harga Bersih (Selepas Diskaun)"


def test_get_translation_unknown_language() -> None:
    """Unknown languages raise a 404 contract error."""
    with pytest.raises(UnsupportedLanguageError) as exc_info:
        get_translation("fr")

    err = exc_info.value
    assert isinstance(err, ContractError)
    assert err.code == "UNSUPPORTED_LANGUAGE"
    assert err.status_code == 404
    assert err.details == {"language": "fr", "supported": ["en", "bm"]}


@pytest.mark.parametrize(
    ("language", "mode", "expected"),
    [
        ("en", DiscountMode.PERCENTAGE, "Discount (%)"),
        ("en", DiscountMode.AMOUNT, "Discount (Amount)"),
        ("bm", DiscountMode.PERCENTAGE, "Diskaun (%)"),
        ("bm", DiscountMode.AMOUNT, "Diskaun (Amaun)"),
    ],
)
def test_discount_label(language, mode, expected) -> None:
    """The discount label names the active mode."""
    assert discount_label(get_translation(language), mode) == expected


def test_translation_tables_are_read_only() -> None:
    """Label tables cannot be modified at runtime."""
    with pytest.raises(TypeError):
        TRANSLATIONS["de"] = TRANSLATIONS["en"]  # type: ignore[index]

    with pytest.raises(ValidationError):
        TRANSLATIONS["en"].title = "changed"  # type: ignore[misc]
