"""Account ledger with unique ids and overwrite-only balance updates."""

from collections import Counter
from dataclasses import dataclass, field, replace
from typing import Iterable

from atm_sim.exceptions import AccountNotFoundError, DuplicateAccountError
from atm_sim.logging import get_logger
from atm_sim.models import Account, AccountSpec

logger = get_logger(__name__)


@dataclass
class Ledger:
    """In-memory store of customer accounts keyed by id.

    The ledger is the only component allowed to read or write balances.
    It performs no range checks of its own; withdrawal policy belongs to
    the session.
    """

    _accounts: dict[int, Account] = field(default_factory=dict, init=False, repr=False)

    @classmethod
    def from_specs(cls, specs: Iterable[AccountSpec]) -> "Ledger":
        """Create a ledger initialized from ``specs``."""
        ledger = cls()
        ledger.initialize(specs)
        return ledger

    def initialize(self, specs: Iterable[AccountSpec]) -> None:
        """Replace all accounts with those built from ``specs``.

        Raises
        ------
        DuplicateAccountError
            If two specs share an id. The existing accounts are kept.
        """
        specs = list(specs)
        counts = Counter(spec.id for spec in specs)
        duplicates = sorted(account_id for account_id, n in counts.items() if n > 1)
        if duplicates:
            raise DuplicateAccountError(
                f"Duplicate account ids: {', '.join(str(d) for d in duplicates)}"
            )

        self._accounts = {spec.id: Account.from_spec(spec) for spec in specs}
        logger.info("Ledger initialized with %d accounts", len(self._accounts))

    # Query methods
    def get_balance(self, account_id: int) -> int:
        """Get the current balance of an account."""
        return self._get(account_id).balance

    def get_name(self, account_id: int) -> str:
        """Get the customer name of an account."""
        return self._get(account_id).name

    def update_balance(self, account_id: int, new_balance: int) -> None:
        """Set the balance of an account to exactly ``new_balance``."""
        account = self._get(account_id)
        logger.debug(
            "Account %d balance %d -> %d", account_id, account.balance, new_balance
        )
        self._accounts[account_id] = replace(account, balance=new_balance)

    def get_account(self, account_id: int) -> Account:
        """Get an immutable snapshot of an account."""
        return self._get(account_id)

    def has_account(self, account_id: int) -> bool:
        """Check whether an account with this id exists."""
        return account_id in self._accounts

    def account_ids(self) -> list[int]:
        """Return all account ids in ascending order."""
        return sorted(self._accounts)

    def summary(self) -> dict[str, int]:
        """Return account count and total balance."""
        return {
            "accounts": len(self._accounts),
            "total_balance": sum(a.balance for a in self._accounts.values()),
        }

    def _get(self, account_id: int) -> Account:
        try:
            return self._accounts[account_id]
        except KeyError:
            raise AccountNotFoundError(account_id) from None

    def __contains__(self, account_id: object) -> bool:
        return account_id in self._accounts

    def __len__(self) -> int:
        return len(self._accounts)
