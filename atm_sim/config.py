"""Configuration management for atm-sim."""

import os
from dataclasses import dataclass
from pathlib import Path


@dataclass
class AtmConfig:
    """Main configuration for the ATM terminal.

    ``allow_overdraft`` selects the withdrawal policy: when False a
    withdrawal larger than the balance is rejected, when True the balance
    is allowed to go negative.
    """

    allow_overdraft: bool = False
    log_level: str = "INFO"
    log_format: str = "standard"
    accounts_file: Path | None = None
    demo_accounts: int = 5
    seed: int | None = None

    @classmethod
    def from_env(cls) -> "AtmConfig":
        """Create config from environment variables."""
        accounts_file = os.getenv("ATM_ACCOUNTS_FILE")

        return cls(
            allow_overdraft=os.getenv("ATM_ALLOW_OVERDRAFT", "false").lower() == "true",
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "standard"),
            accounts_file=Path(accounts_file) if accounts_file else None,
            demo_accounts=int(os.getenv("ATM_DEMO_ACCOUNTS", "5")),
            seed=int(os.getenv("SEED")) if os.getenv("SEED") else None,
        )
