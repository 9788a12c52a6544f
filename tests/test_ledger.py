"""Tests for the account ledger."""

import dataclasses

import pytest

from atm_sim.exceptions import AccountNotFoundError, DuplicateAccountError
from atm_sim.models import AccountSpec
from atm_sim.store import Ledger


class TestLedgerInitialize:
    """Tests for ledger initialization."""

    def test_values_match_specs(self, account_specs: list[AccountSpec]) -> None:
        """Balances and names equal the initializing values before any mutation."""
        ledger = Ledger.from_specs(account_specs)

        for spec in account_specs:
            assert ledger.get_balance(spec.id) == spec.balance
            assert ledger.get_name(spec.id) == spec.name

    def test_empty_ledger(self) -> None:
        ledger = Ledger()

        assert len(ledger) == 0
        assert ledger.account_ids() == []

    def test_duplicate_ids_rejected(self) -> None:
        specs = [
            AccountSpec(name="A", id=1, balance=10),
            AccountSpec(name="B", id=1, balance=20),
        ]

        with pytest.raises(DuplicateAccountError, match="Duplicate account ids: 1"):
            Ledger.from_specs(specs)

    def test_duplicate_ids_keep_previous_state(self, ledger: Ledger) -> None:
        specs = [
            AccountSpec(name="X", id=9, balance=1),
            AccountSpec(name="Y", id=9, balance=2),
        ]

        with pytest.raises(DuplicateAccountError):
            ledger.initialize(specs)

        assert ledger.account_ids() == [1, 2, 42]
        assert ledger.get_balance(1) == 100

    def test_initialize_replaces_prior_state(self, ledger: Ledger) -> None:
        ledger.initialize([AccountSpec(name="Dave", id=7, balance=5)])

        assert ledger.account_ids() == [7]
        assert not ledger.has_account(1)

    def test_initialize_accepts_generator(self) -> None:
        ledger = Ledger()
        ledger.initialize(AccountSpec(name=f"C{i}", id=i, balance=i) for i in range(3))

        assert len(ledger) == 3

    def test_negative_initial_balance_allowed(self) -> None:
        ledger = Ledger.from_specs([AccountSpec(name="A", id=1, balance=-5)])

        assert ledger.get_balance(1) == -5


class TestLedgerQueries:
    """Tests for balance and name lookups."""

    def test_get_balance_unknown(self, ledger: Ledger) -> None:
        with pytest.raises(AccountNotFoundError, match="Account 99 not found"):
            ledger.get_balance(99)

    def test_get_name_unknown(self, ledger: Ledger) -> None:
        with pytest.raises(AccountNotFoundError):
            ledger.get_name(99)

    def test_has_account(self, ledger: Ledger) -> None:
        assert ledger.has_account(42)
        assert not ledger.has_account(3)
        assert 2 in ledger
        assert 3 not in ledger

    def test_summary(self, ledger: Ledger) -> None:
        assert ledger.summary() == {"accounts": 3, "total_balance": 350}


class TestLedgerUpdate:
    """Tests for balance updates."""

    def test_update_keeps_id_and_name(self, ledger: Ledger) -> None:
        before = ledger.get_account(1)

        ledger.update_balance(1, 75)

        after = ledger.get_account(1)
        assert (after.id, after.name, after.balance) == (1, "Alice", 75)
        assert before.balance == 100

    def test_accounts_not_exposed(self, ledger: Ledger) -> None:
        assert not hasattr(ledger, "accounts")
        with pytest.raises(dataclasses.FrozenInstanceError):
            ledger.get_account(1).name = "x"  # type: ignore[misc]
        assert ledger.get_name(1) == "Alice"

    def test_constructor_takes_no_accounts(self) -> None:
        with pytest.raises(TypeError):
            Ledger({})  # type: ignore[call-arg]

    def test_update_overwrites(self, ledger: Ledger) -> None:
        """update_balance sets the value, it does not add to it."""
        ledger.update_balance(1, 30)
        assert ledger.get_balance(1) == 30

        ledger.update_balance(1, 30)
        assert ledger.get_balance(1) == 30

    @pytest.mark.parametrize("value", [0, -50, 10**12])
    def test_update_accepts_any_int(self, ledger: Ledger, value: int) -> None:
        ledger.update_balance(2, value)

        assert ledger.get_balance(2) == value

    def test_update_leaves_other_accounts(self, ledger: Ledger) -> None:
        ledger.update_balance(1, 0)

        assert ledger.get_balance(2) == 250
        assert ledger.get_name(1) == "Alice"

    def test_update_unknown(self, ledger: Ledger) -> None:
        with pytest.raises(AccountNotFoundError):
            ledger.update_balance(99, 10)

        assert 99 not in ledger
