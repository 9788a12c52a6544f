"""Turn raw terminal input into validated ids, amounts and actions.

Every function here retries until it gets acceptable input, so the
session only ever sees well-formed values. There is no retry limit; a
closed terminal surfaces as ``TerminalClosedError``.
"""

import re

from atm_sim.logging import get_logger
from atm_sim.models import Action, Balance, Deposit, Finished, Next, Withdraw
from atm_sim.store.ledger import Ledger
from atm_sim.terminals.base import TerminalIO

logger = get_logger(__name__)

ID_PROMPT = "Enter id: "
AMOUNT_PROMPT = "Enter amount: "
ACTION_PROMPT = "Enter action: (B) Balance (-) Withdraw (+) Deposit (=) Done (X) Exit: "

INVALID_ID = "Invalid id"
INVALID_AMOUNT = "Invalid amount"
INVALID_ACTION = "Invalid action."

DECIMAL_RE = re.compile(r"[+-]?[0-9]+")

SIMPLE_ACTIONS: dict[str, Action] = {
    "B": Balance(),
    "=": Next(),
    "X": Finished(),
}


def parse_int(text: str) -> int | None:
    """Parse a signed ASCII decimal integer, returning None otherwise.

    Surrounding whitespace is ignored. Underscores, non-ASCII digits and
    base prefixes are rejected.
    """
    match = DECIMAL_RE.fullmatch(text.strip())
    if match is None:
        return None
    return int(match.group())


def acquire_id(terminal: TerminalIO, ledger: Ledger) -> int:
    """Prompt until the customer enters the id of an existing account."""
    while True:
        account_id = parse_int(terminal.read_line(ID_PROMPT))
        if account_id is not None and ledger.has_account(account_id):
            return account_id
        logger.debug("Rejected id input")
        terminal.present_message(INVALID_ID)


def acquire_amount(terminal: TerminalIO) -> int:
    """Prompt until the customer enters an integer amount.

    Sign and magnitude are not checked here.
    """
    while True:
        amount = parse_int(terminal.read_line(AMOUNT_PROMPT))
        if amount is not None:
            return amount
        terminal.present_message(INVALID_AMOUNT)


def acquire_action(terminal: TerminalIO) -> Action:
    """Prompt until the customer picks a recognised action."""
    while True:
        token = terminal.read_line(ACTION_PROMPT).strip()
        if token in SIMPLE_ACTIONS:
            return SIMPLE_ACTIONS[token]
        if token == "-":
            return Withdraw(acquire_amount(terminal))
        if token == "+":
            return Deposit(acquire_amount(terminal))
        logger.debug("Rejected action token %r", token)
        terminal.present_message(INVALID_ACTION)
