"""Domain models for the ATM simulator."""

from atm_sim.models.account import Account, AccountSpec
from atm_sim.models.actions import Action, Balance, Deposit, Finished, Next, Withdraw
from atm_sim.models.enums import SessionState

__all__ = [
    "Account",
    "AccountSpec",
    "Action",
    "Balance",
    "Deposit",
    "Finished",
    "Next",
    "SessionState",
    "Withdraw",
]
