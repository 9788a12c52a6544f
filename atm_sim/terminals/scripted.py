"""Terminal that replays a fixed sequence of input lines."""

from typing import Iterable

from atm_sim.exceptions import TerminalClosedError


class ScriptedTerminal:
    """Replay scripted input and record everything presented.

    Used by tests and for replaying recorded sessions. Once the script
    runs out, ``read_line`` raises ``TerminalClosedError`` instead of
    blocking.
    """

    def __init__(self, lines: Iterable[str]) -> None:
        """Initialize scripted terminal.

        Parameters
        ----------
        lines : Iterable[str]
            Input lines, returned one per ``read_line`` call.
        """
        self._lines = list(lines)
        self._index = 0
        self.prompts: list[str] = []
        self.messages: list[str] = []
        self.cash: list[int] = []

    def read_line(self, prompt: str) -> str:
        """Return the next scripted line."""
        self.prompts.append(prompt)
        if self._index >= len(self._lines):
            raise TerminalClosedError(f"Script exhausted after {len(self._lines)} lines")
        line = self._lines[self._index]
        self._index += 1
        return line

    def present_message(self, message: str) -> None:
        """Record a presented message."""
        self.messages.append(message)

    def deliver_cash(self, amount: int) -> None:
        """Record dispensed cash."""
        self.cash.append(amount)

    @property
    def remaining(self) -> int:
        """Number of scripted lines not yet consumed."""
        return len(self._lines) - self._index
