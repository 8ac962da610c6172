"""Pytest fixtures for testing"""

import pytest
from decimal import Decimal
from fastapi.testclient import TestClient
from nwfee_gateway.api.main import create_app
from nwfee_gateway.api.dependencies import get_ruleset, reset_ruleset
from nwfee_gateway.domain.models import Transaction, Ruleset
from nwfee_gateway.infrastructure.rulesets.loader import parse_ruleset


RULESET_YAML = """
id: "test-ruleset"
name: "Test network fees"
effectiveDate: "2023-04-01"
status: ACTIVE
fees:
  - key: visa-swiped
    name: Visa swiped
    description: Example fee from the fee schedule
    pctRate: 0.01
    txRate: 0.10
    authRate: 0.05
    rules:
      - cardType: VISA
        cardEntryMode: SWIPED
  - key: visa-debit-auth
    name: Visa debit authorization
    description: Per-authorization fee on Visa debit
    authRate: 0.02
    rules:
      - cardType: VISA
        debit: true
  - key: mastercard-small-ticket
    name: Mastercard small ticket
    description: Only sales up to 15.00
    pctRate: 0.002
    rules:
      - cardType: MASTERCARD
        minTxAmount: 0
        maxTxAmount: 15.00
"""


def make_transaction(**overrides) -> Transaction:
    """Visa debit $10.00 swiped sale unless overridden"""
    fields = dict(
        order_amount=Decimal("10.00"),
        card_type="VISA",
        card_entry_mode="SWIPED",
        debit=True,
        prepaid=False,
        international=False,
        opt_blue=False,
    )
    fields.update(overrides)
    return Transaction(**fields)


@pytest.fixture
def ruleset() -> Ruleset:
    """Small ruleset covering equality, flag and amount range rules"""
    return parse_ruleset(RULESET_YAML)


@pytest.fixture
def visa_debit_tx() -> Transaction:
    return make_transaction()


@pytest.fixture
def visa_credit_tx() -> Transaction:
    return make_transaction(debit=False)


@pytest.fixture
def client(ruleset: Ruleset) -> TestClient:
    """Create FastAPI test client serving the test ruleset"""
    app = create_app()
    app.dependency_overrides[get_ruleset] = lambda: ruleset
    return TestClient(app)


@pytest.fixture(autouse=True)
def fresh_ruleset_cache():
    """Keep the lazily loaded ruleset from leaking between tests"""
    reset_ruleset()
    yield
    reset_ruleset()


@pytest.fixture
def tx_factory():
    """Build transactions from the Visa debit baseline"""
    return make_transaction
