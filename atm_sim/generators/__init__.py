"""Generators for demo ledger data."""

from atm_sim.generators.accounts import AccountSpecGenerator

__all__ = ["AccountSpecGenerator"]
