"""Shared test fixtures."""

from collections.abc import Generator
from typing import Any

import pytest
from fastapi.testclient import TestClient

from margincalc.api import create_app, limiter
from margincalc.config import CalculatorConfig, reload_config
from margincalc.dependencies import get_app_config, get_pricing_service
from margincalc.service import PricingService, build_service


@pytest.fixture
def test_config() -> CalculatorConfig:
    """Provide a config isolated from any local .env file."""
    return CalculatorConfig(
        _env_file=None,
        currency_symbol="RM",
        currency_code="MYR",
        default_language="en",
        default_target_margin_pct=30.0,
        result_cache_enabled=True,
        result_cache_max_entries=16,
    )


@pytest.fixture
def pricing_service(test_config: CalculatorConfig) -> PricingService:
    return build_service(test_config)


@pytest.fixture
def api_test_app(
    monkeypatch: pytest.MonkeyPatch,
    test_config: CalculatorConfig,
    pricing_service: PricingService,
) -> Generator[Any, None, None]:
    """Create a fresh FastAPI app with explicit dependency overrides."""
    monkeypatch.setenv("ALLOWED_ORIGINS", "http://localhost:5173")
    monkeypatch.delenv("RATE_LIMIT", raising=False)
    reload_config()
    limiter.reset()
    app = create_app()
    app.dependency_overrides[get_app_config] = lambda: test_config
    app.dependency_overrides[get_pricing_service] = lambda: pricing_service
    try:
        yield app
    finally:
        app.dependency_overrides.clear()
        limiter.reset()
        reload_config()


@pytest.fixture
def api_test_client(api_test_app: Any) -> Generator[TestClient, None, None]:
    """Create a TestClient for the overridden API app."""
    with TestClient(api_test_app) as client:
        yield client
