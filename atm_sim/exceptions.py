"""Custom exception hierarchy for atm-sim."""


class AtmError(Exception):
    """Base exception for all atm-sim errors."""


class AccountNotFoundError(AtmError):
    """Raised when a ledger lookup references an id that does not exist."""

    def __init__(self, account_id: int) -> None:
        super().__init__(f"Account {account_id} not found")
        self.account_id = account_id


class LedgerConsistencyError(AtmError):
    """Raised when an authenticated customer's account vanishes from the ledger."""


class TransactionRejectedError(AtmError):
    """Raised when an action is refused and the ledger is left untouched."""


class InsufficientFundsError(TransactionRejectedError):
    """Raised when a withdrawal exceeds the balance and overdraft is disabled."""


class InvalidAmountError(TransactionRejectedError):
    """Raised when a withdrawal or deposit amount is zero or negative."""


class ConfigurationError(AtmError):
    """Raised when configuration is invalid or missing."""


class DuplicateAccountError(ConfigurationError):
    """Raised when the ledger is initialized with a repeated account id."""


class TerminalClosedError(AtmError):
    """Raised when the terminal input source is closed or exhausted."""


class InvalidSessionStateError(AtmError):
    """Raised when a session operation is invoked in the wrong state."""
