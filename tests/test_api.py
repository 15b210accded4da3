"""FastAPI endpoint tests."""

from fastapi.testclient import TestClient

from margincalc.api import create_app, limiter
from margincalc.config import reload_config


def test_health_check(api_test_client) -> None:
    """Health endpoint reports status and configured currency."""
    response = api_test_client.get("/health")
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["currency"] == "MYR"


def test_calculate_example_scenario(api_test_client) -> None:
    """Worked example returns raw numbers, display strings and labels."""
    response = api_test_client.post(
        "/pricing/calculate",
        json={
            "list_price": 100,
            "unit_cost": 60,
            "discount_mode": "pct",
            "discount_value": 10,
            "target_margin_pct": 30,
        },
    )
    assert response.status_code == 200
    data = response.json()
    assert data["result"]["net_price"] == 90.0
    assert data["result"]["gross_profit_per_unit"] == 30.0
    assert data["result"]["markup_pct"] == 0.5
    assert data["display"]["margin_pct"] == "33.3333%"
    assert data["display"]["price_for_target_margin"] == "RM85.71"
    assert data["labels"]["price_for_target_margin"] == "Price for Target Margin"


def test_calculate_accepts_string_and_empty_fields(api_test_client) -> None:
    """Empty and non-numeric strings normalize to zero."""
    response = api_test_client.post(
        "/pricing/calculate",
        json={"list_price": "", "unit_cost": "abc", "discount_value": None},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["inputs"]["list_price"] == 0.0
    assert data["inputs"]["unit_cost"] == 0.0
    assert data["inputs"]["target_margin_pct"] == 30.0
    assert data["result"]["net_price"] == 0.0
    assert data["result"]["margin_pct"] == 0.0
    assert data["result"]["price_for_target_margin"] is None
    assert data["display"]["price_for_target_margin"] == "N/A"


def test_calculate_boolean_fields_are_zero(api_test_client) -> None:
    """JSON booleans are not numbers and normalize to zero."""
    response = api_test_client.post(
        "/pricing/calculate",
        json={"list_price": True, "unit_cost": 60, "discount_value": False},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["inputs"]["list_price"] == 0.0
    assert data["inputs"]["discount_value"] == 0.0
    assert data["result"]["net_price"] == 0.0


def test_calculate_overflowing_markup_is_null(api_test_client) -> None:
    """A markup too large for a float serializes as null, not as a number."""
    response = api_test_client.post(
        "/pricing/calculate",
        json={"list_price": 1e308, "unit_cost": 1e-300},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["result"]["markup_pct"] is None
    assert data["result"]["margin_pct"] == 1.0
    assert data["display"]["markup_pct"] == "N/A"


def test_calculate_target_of_hundred_is_not_applicable(api_test_client) -> None:
    """A 100% target has no finite price."""
    response = api_test_client.post(
        "/pricing/calculate",
        json={"list_price": 100, "unit_cost": 60, "target_margin_pct": 100},
    )
    assert response.status_code == 200
    assert response.json()["result"]["price_for_target_margin"] is None


def test_calculate_bahasa_labels(api_test_client) -> None:
    """The language field selects the label table."""
    response = api_test_client.post(
        "/pricing/calculate",
        json={"list_price": 100, "unit_cost": 60, "language": "bm"},
    )
    assert response.status_code == 200
    assert response.json()["labels"]["net_price"] == "Harga Bersih (Selepas Diskaun)"


def test_calculate_unsupported_language(api_test_client) -> None:
    """Unknown languages map to the contract error payload."""
    response = api_test_client.post(
        "/pricing/calculate",
        json={"list_price": 100, "language": "fr"},
    )
    assert response.status_code == 404
    error = response.json()["error"]
    assert error["code"] == "UNSUPPORTED_LANGUAGE"
    assert error["details"]["supported"] == ["en", "bm"]


def test_calculate_rejects_unknown_discount_mode(api_test_client) -> None:
    """The API validates discount_mode against the enum."""
    response = api_test_client.post(
        "/pricing/calculate",
        json={"list_price": 100, "discount_mode": "bogus"},
    )
    assert response.status_code == 422


def test_list_languages(api_test_client) -> None:
    """Supported languages are listed in order."""
    response = api_test_client.get("/translations")
    assert response.status_code == 200
    assert response.json() == {"languages": ["en", "bm"]}


def test_read_translation(api_test_client) -> None:
    """A label table is served per language."""
    response = api_test_client.get("/translations/bm")
    assert response.status_code == 200
    data = response.json()
    assert data["results_section"] == "Keputusan"
    assert data["product_fields"]["discount_units"]["amount"] == "Amaun"


def test_read_translation_unknown(api_test_client) -> None:
    """Unknown label tables return 404."""
    response = api_test_client.get("/translations/xx")
    assert response.status_code == 404
    assert response.json()["error"]["code"] == "UNSUPPORTED_LANGUAGE"


def test_calculate_rate_limited(monkeypatch) -> None:
    """Requests beyond RATE_LIMIT are rejected with 429."""
    monkeypatch.setenv("RATE_LIMIT", "2/minute")
    reload_config()
    limiter.reset()
    try:
        with TestClient(create_app()) as client:
            statuses = [
                client.post("/pricing/calculate", json={"list_price": 10}).status_code
                for _ in range(3)
            ]
        assert statuses == [200, 200, 429]
    finally:
        monkeypatch.delenv("RATE_LIMIT", raising=False)
        reload_config()
        limiter.reset()
