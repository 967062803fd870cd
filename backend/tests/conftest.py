import pytest
from fastapi.testclient import TestClient

from esr_slip.core.reference_encoder import ReferenceEncoder
from esr_slip.core.slip_data import SlipData
from esr_slip.main import app


@pytest.fixture
def slip():
    """
    Slip paying CHF 100.05 into postal account 01-123-4.
    account_digits() == "010001234"
    """
    data = SlipData()
    data.account_number = "01-123-4"
    data.amount = "100.05"
    return data


@pytest.fixture
def encoder(slip):
    """BESR encoder with banking customer ID 123456 and reference "1"."""
    enc = ReferenceEncoder(slip)
    enc.banking_customer_id = "123456"
    enc.reference_number = "1"
    return enc


@pytest.fixture
def client():
    return TestClient(app)
