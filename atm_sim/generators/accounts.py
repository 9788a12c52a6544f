"""Account spec generator for demo ledgers."""

from typing import Iterator

from atm_sim.generators.base import BaseGenerator
from atm_sim.models import AccountSpec


class AccountSpecGenerator(BaseGenerator):
    """Generate account specs with fake customer names.

    Ids are sequential from ``first_id`` so a generated batch never
    contains duplicates.
    """

    MIN_BALANCE = 0
    MAX_BALANCE = 5000

    def __init__(
        self,
        seed: int | None = None,
        locale: str = "en_US",
        first_id: int = 1,
    ) -> None:
        super().__init__(seed, locale=locale)
        self._next_id = first_id

    def generate(self) -> AccountSpec:
        """Generate a single account spec."""
        spec = AccountSpec(
            name=self.fake.name(),
            id=self._next_id,
            balance=self.rng.randint(self.MIN_BALANCE, self.MAX_BALANCE),
        )
        self._next_id += 1
        return spec

    def generate_batch(self, count: int) -> Iterator[AccountSpec]:
        """Generate ``count`` account specs."""
        for _ in range(count):
            yield self.generate()
