"""Single-terminal ATM simulator: account ledger plus customer session protocol."""

__version__ = "0.1.0"
