"""In-memory account ledger."""

from atm_sim.store.ledger import Ledger
from atm_sim.store.loader import load_account_specs

__all__ = ["Ledger", "load_account_specs"]
