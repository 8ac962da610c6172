"""Integration tests for API endpoints"""

import pytest
from fastapi.testclient import TestClient
from nwfee_gateway.api.main import create_app
from nwfee_gateway.config import settings


@pytest.fixture
def visa_debit_body():
    """Visa debit $10.00 swiped sale"""
    return {
        "order_amount": "10.00",
        "card_type": "VISA",
        "card_entry_mode": "SWIPED",
        "debit": True,
    }


def test_health_endpoint(client: TestClient):
    """Test health check endpoint"""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_metrics_endpoint(client: TestClient):
    """Test Prometheus metrics endpoint"""
    response = client.get("/metrics")
    assert response.status_code == 200
    assert "nwfee_assessment_total" in response.text


def test_assess_visa_debit(client: TestClient, visa_debit_body):
    """Test POST /v1/fees/assess sums every matched definition"""
    response = client.post("/v1/fees/assess", json=visa_debit_body)

    assert response.status_code == 200
    data = response.json()
    assert data["ruleset_id"] == "test-ruleset"
    assert data["fee_total"] == "0.2700"
    assert [(c["fee_key"], c["amount"]) for c in data["contributions"]] == [
        ("visa-swiped", "0.2500"),
        ("visa-debit-auth", "0.0200"),
    ]


def test_assess_visa_credit(client: TestClient, visa_debit_body):
    """Test the debit-only definition drops out for credit cards"""
    response = client.post("/v1/fees/assess", json={**visa_debit_body, "debit": False})

    assert response.status_code == 200
    assert response.json()["fee_total"] == "0.2500"


def test_assess_no_matching_definition(client: TestClient):
    """Test transactions outside every rule are charged nothing"""
    response = client.post(
        "/v1/fees/assess",
        json={"order_amount": "15.01", "card_type": "MASTERCARD", "card_entry_mode": "KEYED"},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["fee_total"] == "0.0000"
    assert data["contributions"] == []


def test_assess_amount_at_range_boundary(client: TestClient):
    """Test the inclusive maximum of the small ticket rule"""
    response = client.post(
        "/v1/fees/assess",
        json={"order_amount": "15.00", "card_type": "MASTERCARD", "card_entry_mode": "KEYED"},
    )

    # 0.002 * 15.00
    assert response.json()["fee_total"] == "0.0300"


def test_assess_rejects_negative_amount(client: TestClient, visa_debit_body):
    """Test request validation on order amount"""
    response = client.post("/v1/fees/assess", json={**visa_debit_body, "order_amount": "-1"})
    assert response.status_code == 422


def test_assess_requires_card_type(client: TestClient, visa_debit_body):
    body = {k: v for k, v in visa_debit_body.items() if k != "card_type"}
    response = client.post("/v1/fees/assess", json=body)
    assert response.status_code == 422


def test_request_id_is_echoed(client: TestClient, visa_debit_body):
    """Test caller supplied request IDs are returned for log correlation"""
    response = client.post("/v1/fees/assess", json=visa_debit_body, headers={"X-Request-ID": "req-123"})

    assert response.headers["X-Request-ID"] == "req-123"


def test_request_id_is_generated(client: TestClient):
    response = client.get("/health")
    assert response.headers["X-Request-ID"]


def test_ruleset_endpoint(client: TestClient):
    """Test GET /v1/ruleset lists definitions in evaluation order"""
    response = client.get("/v1/ruleset")

    assert response.status_code == 200
    data = response.json()
    assert data["id"] == "test-ruleset"
    assert data["status"] == "ACTIVE"
    assert [fee["key"] for fee in data["fees"]] == [
        "visa-swiped",
        "visa-debit-auth",
        "mastercard-small-ticket",
    ]
    assert data["fees"][0]["pct_rate"] == "0.01"
    assert data["fees"][0]["criteria_count"] == 1


def test_assess_without_ruleset_returns_503(monkeypatch, tmp_path, visa_debit_body):
    """Test an unloadable ruleset file makes the service unavailable"""
    monkeypatch.setattr(settings, "ruleset_path", str(tmp_path / "missing.yaml"))
    client = TestClient(create_app())

    response = client.post("/v1/fees/assess", json=visa_debit_body)

    assert response.status_code == 503
    assert response.json()["detail"] == "Fee ruleset unavailable"


def test_ruleset_loaded_from_settings_path(monkeypatch, tmp_path, visa_debit_body):
    """Test the ruleset is read lazily from the configured path"""
    path = tmp_path / "rules.yaml"
    path.write_text(
        'id: "file-rules"\nname: File\neffectiveDate: "2024-01-01"\nstatus: ACTIVE\n'
        "fees:\n  - key: flat\n    txRate: 0.05\n    rules:\n      - cardType: VISA\n",
        encoding="utf-8",
    )
    monkeypatch.setattr(settings, "ruleset_path", str(path))
    client = TestClient(create_app())

    response = client.post("/v1/fees/assess", json=visa_debit_body)

    assert response.status_code == 200
    assert response.json()["ruleset_id"] == "file-rules"
    assert response.json()["fee_total"] == "0.0500"


def test_assess_rejects_amount_above_limit(client: TestClient, visa_debit_body):
    """Test amounts too large to assess are refused instead of failing"""
    response = client.post("/v1/fees/assess", json={**visa_debit_body, "order_amount": "1E+30"})
    assert response.status_code == 422


def test_assess_rejects_sub_cent_amount(client: TestClient, visa_debit_body):
    """Test amounts between tier bounds such as 999.995 cannot be submitted"""
    response = client.post("/v1/fees/assess", json={**visa_debit_body, "order_amount": "999.995"})
    assert response.status_code == 422


def test_assess_largest_accepted_amount(client: TestClient, visa_debit_body):
    """Test the upper amount limit is assessed and rounded for display"""
    response = client.post("/v1/fees/assess", json={**visa_debit_body, "order_amount": "9999999999999.99"})

    assert response.status_code == 200
    # 0.01 * 9999999999999.99 + 0.10 + 0.05 + 0.02
    assert response.json()["fee_total"] == "100000000000.1699"
