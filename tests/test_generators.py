"""Tests for demo account generation."""

from atm_sim.generators import AccountSpecGenerator
from atm_sim.store import Ledger


class TestAccountSpecGenerator:
    """Tests for AccountSpecGenerator."""

    def test_generate(self, seed: int) -> None:
        spec = AccountSpecGenerator(seed=seed).generate()

        assert spec.id == 1
        assert spec.name
        assert AccountSpecGenerator.MIN_BALANCE <= spec.balance <= AccountSpecGenerator.MAX_BALANCE

    def test_batch_ids_unique(self, seed: int) -> None:
        specs = list(AccountSpecGenerator(seed=seed, first_id=100).generate_batch(20))

        assert [s.id for s in specs] == list(range(100, 120))
        assert len(Ledger.from_specs(specs)) == 20

    def test_seed_reproducible(self, seed: int) -> None:
        first = list(AccountSpecGenerator(seed=seed).generate_batch(5))
        second = list(AccountSpecGenerator(seed=seed).generate_batch(5))

        assert first == second

    def test_empty_batch(self) -> None:
        assert list(AccountSpecGenerator().generate_batch(0)) == []
