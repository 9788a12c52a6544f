"""Customer session state machine for a single ATM terminal."""

from dataclasses import asdict, dataclass
from typing import Callable

from atm_sim.acquisition import acquire_action, acquire_id
from atm_sim.config import AtmConfig
from atm_sim.exceptions import (
    AccountNotFoundError,
    InsufficientFundsError,
    InvalidAmountError,
    InvalidSessionStateError,
    LedgerConsistencyError,
    TransactionRejectedError,
)
from atm_sim.logging import get_logger
from atm_sim.models import (
    Action,
    Balance,
    Deposit,
    Finished,
    Next,
    SessionState,
    Withdraw,
)
from atm_sim.store.ledger import Ledger
from atm_sim.terminals.base import TerminalIO

logger = get_logger(__name__)


@dataclass
class SessionStats:
    """Running counters for one terminal run."""

    customers_served: int = 0
    actions_processed: int = 0
    cash_dispensed: int = 0
    amount_deposited: int = 0
    rejected: int = 0


class Session:
    """Drive one terminal through customers until shutdown.

    States move ``AWAITING_CUSTOMER -> AUTHENTICATED`` on a valid id,
    stay ``AUTHENTICATED`` across balance, withdraw and deposit actions,
    return to ``AWAITING_CUSTOMER`` on ``Next`` and end in ``HALTED`` on
    ``Finished``. Shutdown can only be requested by an authenticated
    customer.

    Parameters
    ----------
    ledger : Ledger
        Account ledger, owned by the caller.
    terminal : TerminalIO
        Input and presentation collaborator.
    config : AtmConfig | None
        Terminal configuration; defaults reject overdrafts.
    """

    def __init__(
        self,
        ledger: Ledger,
        terminal: TerminalIO,
        config: AtmConfig | None = None,
    ) -> None:
        self.ledger = ledger
        self.terminal = terminal
        self.config = config or AtmConfig()
        self.stats = SessionStats()
        self._state = SessionState.AWAITING_CUSTOMER
        self._current_id: int | None = None

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def current_id(self) -> int | None:
        return self._current_id

    @property
    def is_halted(self) -> bool:
        return self._state is SessionState.HALTED

    def run(self) -> None:
        """Serve customers until one of them shuts the terminal down."""
        logger.info("Terminal started")
        while not self.is_halted:
            self.step()
        logger.info("Terminal halted: %s", self.summary())

    def step(self) -> None:
        """Advance the state machine by one acquisition."""
        if self._state is SessionState.AWAITING_CUSTOMER:
            self.authenticate()
        elif self._state is SessionState.AUTHENTICATED:
            self.handle(acquire_action(self.terminal))
        else:
            raise InvalidSessionStateError("Terminal is halted")

    def authenticate(self) -> int:
        """Acquire a customer id and greet the customer."""
        self._require(SessionState.AWAITING_CUSTOMER)
        account_id = acquire_id(self.terminal, self.ledger)
        self._current_id = account_id
        self._state = SessionState.AUTHENTICATED
        self.stats.customers_served += 1
        logger.info("Customer %d authenticated", account_id)
        self._guarded(lambda: self.terminal.present_message(f"Welcome, {self._name()}"))
        return account_id

    def handle(self, action: Action) -> None:
        """Apply one action for the authenticated customer.

        Rejected withdrawals and deposits are reported to the customer and
        leave the ledger unchanged. A missing account is fatal.
        """
        self._require(SessionState.AUTHENTICATED)
        self.stats.actions_processed += 1
        try:
            self._guarded(lambda: self._apply(action))
        except TransactionRejectedError as e:
            self.stats.rejected += 1
            logger.warning("Customer %d: %s rejected: %s", self._current_id, action, e)
            self.terminal.present_message(str(e))

    def summary(self) -> dict[str, int]:
        """Return counters for this run."""
        return asdict(self.stats)

    def _apply(self, action: Action) -> None:
        account_id = self._current_id
        if isinstance(action, Balance):
            balance = self.ledger.get_balance(account_id)
            self.terminal.present_message(f"Current balance: {balance}")
        elif isinstance(action, Withdraw):
            self._withdraw(account_id, action.amount)
        elif isinstance(action, Deposit):
            self._deposit(account_id, action.amount)
        elif isinstance(action, Next):
            self.terminal.present_message(f"Goodbye, {self._name()}")
            logger.info("Customer %d done", account_id)
            self._current_id = None
            self._state = SessionState.AWAITING_CUSTOMER
        elif isinstance(action, Finished):
            logger.info("Shutdown requested by customer %d", account_id)
            self._current_id = None
            self._state = SessionState.HALTED
            self.terminal.present_message("So long.")
        else:
            raise TypeError(f"Unknown action: {action!r}")

    def _withdraw(self, account_id: int, amount: int) -> None:
        if amount <= 0:
            raise InvalidAmountError(f"Invalid amount {amount}: must be positive")
        balance = self.ledger.get_balance(account_id)
        if amount > balance and not self.config.allow_overdraft:
            raise InsufficientFundsError(
                f"Insufficient funds: balance {balance}, requested {amount}"
            )
        self.ledger.update_balance(account_id, balance - amount)
        self.stats.cash_dispensed += amount
        self.terminal.deliver_cash(amount)

    def _deposit(self, account_id: int, amount: int) -> None:
        if amount <= 0:
            raise InvalidAmountError(f"Invalid amount {amount}: must be positive")
        balance = self.ledger.get_balance(account_id) + amount
        self.ledger.update_balance(account_id, balance)
        self.stats.amount_deposited += amount
        self.terminal.present_message(f"Deposited {amount}. New balance: {balance}")

    def _name(self) -> str:
        return self.ledger.get_name(self._current_id)

    def _guarded(self, operation: Callable[[], None]) -> None:
        """Run a ledger operation; a missing account halts the terminal."""
        try:
            operation()
        except AccountNotFoundError as e:
            logger.error("Ledger lost account %s mid-session", e.account_id)
            failed_id = self._current_id
            self._current_id = None
            self._state = SessionState.HALTED
            raise LedgerConsistencyError(
                f"Account {failed_id} disappeared from the ledger during its session"
            ) from e

    def _require(self, expected: SessionState) -> None:
        if self._state is not expected:
            raise InvalidSessionStateError(
                f"Expected state {expected.value}, terminal is {self._state.value}"
            )
