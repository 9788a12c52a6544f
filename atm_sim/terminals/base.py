"""Interface between the session core and the outside world."""

from typing import Protocol


class TerminalIO(Protocol):
    """Input and presentation primitives used by the session.

    ``read_line`` returns one raw line of text per request and raises
    ``TerminalClosedError`` once no more input can arrive.
    """

    def read_line(self, prompt: str) -> str: ...

    def present_message(self, message: str) -> None: ...

    def deliver_cash(self, amount: int) -> None: ...
