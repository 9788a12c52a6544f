"""Customer actions accepted by the terminal.

Each action is its own frozen dataclass; ``Action`` is the closed union
the session dispatches on.
"""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Balance:
    """Balance inquiry."""


@dataclass(frozen=True)
class Withdraw:
    """Withdraw ``amount`` from the current account."""

    amount: int


@dataclass(frozen=True)
class Deposit:
    """Deposit ``amount`` into the current account."""

    amount: int


@dataclass(frozen=True)
class Next:
    """Finish the current customer and wait for the next one."""


@dataclass(frozen=True)
class Finished:
    """Shut the terminal down."""


Action = Union[Balance, Withdraw, Deposit, Next, Finished]
