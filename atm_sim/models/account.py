"""Account models for the ledger."""

from dataclasses import dataclass


@dataclass(frozen=True)
class AccountSpec:
    """Initialization triple for a single ledger account."""

    name: str
    id: int
    balance: int


@dataclass(frozen=True)
class Account:
    """Customer account held by the ledger.

    Instances are immutable; the ledger records a new balance by
    replacing the account with a copy.
    """

    id: int
    name: str
    balance: int

    @classmethod
    def from_spec(cls, spec: AccountSpec) -> "Account":
        """Build an account from its initialization spec."""
        return cls(id=spec.id, name=spec.name, balance=spec.balance)
