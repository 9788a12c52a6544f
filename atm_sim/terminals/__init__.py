"""Terminal I/O collaborators for the session."""

from atm_sim.terminals.base import TerminalIO
from atm_sim.terminals.console import ConsoleTerminal
from atm_sim.terminals.scripted import ScriptedTerminal

__all__ = ["ConsoleTerminal", "ScriptedTerminal", "TerminalIO"]
