"""Pytest configuration and fixtures."""

import pytest

from atm_sim.models import AccountSpec
from atm_sim.store import Ledger


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def account_specs() -> list[AccountSpec]:
    """Three accounts with distinct ids."""
    return [
        AccountSpec(name="Alice", id=1, balance=100),
        AccountSpec(name="Bob", id=2, balance=250),
        AccountSpec(name="Carol", id=42, balance=0),
    ]


@pytest.fixture
def ledger(account_specs: list[AccountSpec]) -> Ledger:
    """Ledger initialized from the sample specs."""
    return Ledger.from_specs(account_specs)
