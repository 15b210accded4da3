"""Configuration management for the margin calculator."""

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

import pycountry

from margincalc.translations import SUPPORTED_LANGUAGES

logger = logging.getLogger(__name__)


class CalculatorConfig(BaseSettings):
    """Configuration for the calculator CLI and API."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    currency_symbol: str = Field(
        default="RM",
        description="Prefix used when rendering money values",
    )

    currency_code: str = Field(
        default="MYR",
        description="ISO 4217 code reported alongside results",
    )

    default_language: str = Field(
        default="en",
        description="Label language used when a request does not name one",
    )

    default_target_margin_pct: float = Field(
        default=30.0,
        description="Target margin (%) applied when the field is omitted",
    )

    result_cache_enabled: bool = Field(
        default=True,
        description="Memoize results keyed on normalized inputs",
    )

    result_cache_max_entries: int = Field(
        default=1024,
        ge=1,
        le=100000,
        description="Maximum memoized results kept in memory",
    )

    api_host: str = Field(
        default="0.0.0.0",
        description="API host address",
    )

    api_port: int = Field(
        default=8000,
        description="API port",
    )

    allowed_origins: str = Field(
        default="http://localhost:5173",
        description="Comma-separated CORS origins",
    )

    rate_limit: str = Field(
        default="60/minute",
        description="Rate limit applied to calculation endpoints",
    )

    @field_validator("currency_code")
    @classmethod
    def validate_currency_code(cls, v: str) -> str:
        """Validate the currency code is a known ISO 4217 code."""
        code = v.strip().upper()
        if len(code) != 3 or not code.isalpha():
            raise ValueError(
                f"Invalid currency code format: '{v}'. "
                f"Must be a 3-letter ISO 4217 code (e.g., MYR, USD)."
            )
        valid_iso_codes = {c.alpha_3 for c in pycountry.currencies}
        if code not in valid_iso_codes:
            raise ValueError(f"Invalid ISO 4217 code: {code}")
        return code

    @field_validator("default_language")
    @classmethod
    def normalize_language(cls, v: str) -> str:
        return v.strip().lower()

    def get_allowed_origins(self) -> list[str]:
        """Parse CORS origins from comma-separated string."""
        return [o.strip() for o in self.allowed_origins.split(",") if o.strip()]

    def validate_config(self) -> None:
        """Validate configuration at startup. Raises ValueError if invalid."""
        errors = []

        if not self.currency_symbol.strip():
            errors.append("CURRENCY_SYMBOL cannot be empty")

        if self.default_language not in SUPPORTED_LANGUAGES:
            errors.append(
                f"DEFAULT_LANGUAGE must be one of: {', '.join(SUPPORTED_LANGUAGES)}"
            )

        if not 0 <= self.default_target_margin_pct < 100:
            errors.append("DEFAULT_TARGET_MARGIN_PCT must be in [0, 100)")

        if "/" not in self.rate_limit:
            errors.append("RATE_LIMIT must look like '<count>/<period>'")

        if errors:
            raise ValueError(
                "Configuration validation failed:\n"
                + "\n".join(f"  - {e}" for e in errors)
            )


_config_instance = None


def get_config() -> CalculatorConfig:
    """Get or create global configuration instance."""
    global _config_instance
    if _config_instance is None:
        _config_instance = CalculatorConfig()
        _config_instance.validate_config()
        logger.info("Configuration validated successfully")
    return _config_instance


def reload_config() -> CalculatorConfig:
    """Reload configuration (useful for testing)."""
    global _config_instance
    _config_instance = CalculatorConfig()
    return _config_instance
