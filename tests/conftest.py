"""
Pytest configuration and fixtures for retail pricing tests.

Provides common test fixtures, sample orders, and an inventory stub.
"""

import json
import sys
from pathlib import Path

import pytest

# Ensure src/ is on sys.path for local test runs without installation
_SRC = Path(__file__).resolve().parents[1] / "src"
if _SRC.exists() and str(_SRC) not in sys.path:
    sys.path.insert(0, str(_SRC))


class StubInventory:
    """Inventory where every item is in stock except the ones listed."""

    def __init__(self, out_of_stock: set[str] | None = None):
        self.out_of_stock = out_of_stock or set()
        self.calls: list[tuple[str, object]] = []

    def check_stock(self, item_id: str, quantity) -> bool:
        self.calls.append((item_id, quantity))
        return item_id not in self.out_of_stock


@pytest.fixture
def base_order() -> dict:
    """Two lines: (10.00 * 2) + (5.50 * 4) = 42.00."""
    return {
        "items": [
            {"id": "A100", "price": 10.0, "quantity": 2},
            {"id": "B200", "price": 5.5, "quantity": 4},
        ]
    }


@pytest.fixture
def simple_order() -> dict:
    return {"items": [{"id": "A", "price": 100.0, "quantity": 1}]}


@pytest.fixture
def vip_user() -> dict:
    return {
        "id": "user-vip",
        "email": "vip@test.com",
        "address": "Rua A",
        "type": "VIP",
        "state": "CA",
    }


@pytest.fixture
def card_payment() -> dict:
    return {"method": "CREDIT_CARD", "amount": 100}


@pytest.fixture
def express_shipping() -> dict:
    return {"type": "EXPRESS"}


@pytest.fixture
def inventory() -> StubInventory:
    """Inventory where only C100 is out of stock."""
    return StubInventory(out_of_stock={"C100"})


@pytest.fixture
def sample_config_data() -> dict:
    """Pricing configuration overriding a few rate tables."""
    return {
        "rates": {
            "tax_rates": {"ca": "0.10", "or": "0"},
            "shipping_costs": {"EXPRESS": "30", "STANDARD": "10"},
        },
        "log_level": "debug",
    }


@pytest.fixture
def temp_config_file(tmp_path, sample_config_data) -> Path:
    """Write the sample configuration to a temporary pricing.json."""
    path = tmp_path / "pricing.json"
    path.write_text(json.dumps(sample_config_data))
    return path
