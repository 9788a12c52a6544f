"""Interactive console terminal."""

from atm_sim.exceptions import TerminalClosedError


class ConsoleTerminal:
    """Read customer input from stdin and print to stdout."""

    def read_line(self, prompt: str) -> str:
        """Prompt and read one line from stdin."""
        try:
            return input(prompt)
        except EOFError as e:
            raise TerminalClosedError("Console input closed") from e

    def present_message(self, message: str) -> None:
        """Print a message followed by a newline."""
        print(message)

    def deliver_cash(self, amount: int) -> None:
        """Dispense cash (prints a message to that effect)."""
        print(f"Here's your cash: {amount}")
