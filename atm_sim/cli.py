"""Command-line entry point for running the ATM terminal."""

import argparse
from pathlib import Path

from atm_sim.config import AtmConfig
from atm_sim.exceptions import ConfigurationError, LedgerConsistencyError, TerminalClosedError
from atm_sim.generators import AccountSpecGenerator
from atm_sim.logging import get_logger, setup_logging
from atm_sim.models import AccountSpec
from atm_sim.session import Session
from atm_sim.store import Ledger, load_account_specs
from atm_sim.terminals import ConsoleTerminal, TerminalIO

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_INTERNAL_ERROR = 1
EXIT_CONFIG_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        description="Run a single-terminal ATM against an in-memory ledger",
    )
    parser.add_argument(
        "--accounts",
        type=Path,
        default=None,
        help="JSON file with a list of {name, id, balance} objects",
    )
    parser.add_argument(
        "--demo-accounts",
        type=int,
        default=None,
        help="Number of fake accounts to generate when --accounts is not given",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for generated demo accounts",
    )
    parser.add_argument(
        "--allow-overdraft",
        action="store_true",
        default=None,
        help="Allow withdrawals to take balances below zero",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Log level (DEBUG, INFO, WARNING, ERROR)",
    )
    parser.add_argument(
        "--log-format",
        choices=["standard", "json"],
        default=None,
        help="Log output format",
    )
    return parser


def resolve_config(args: argparse.Namespace) -> AtmConfig:
    """Merge command-line flags over environment configuration."""
    config = AtmConfig.from_env()
    if args.accounts is not None:
        config.accounts_file = args.accounts
    if args.demo_accounts is not None:
        config.demo_accounts = args.demo_accounts
    if args.seed is not None:
        config.seed = args.seed
    if args.allow_overdraft is not None:
        config.allow_overdraft = args.allow_overdraft
    if args.log_level is not None:
        config.log_level = args.log_level
    if args.log_format is not None:
        config.log_format = args.log_format
    return config


def load_specs(config: AtmConfig) -> list[AccountSpec]:
    """Load account specs from the configured file or generate demo ones."""
    if config.accounts_file is not None:
        return load_account_specs(config.accounts_file)

    if config.demo_accounts < 1:
        raise ConfigurationError("At least one demo account is required")
    generator = AccountSpecGenerator(seed=config.seed)
    specs = list(generator.generate_batch(config.demo_accounts))
    for spec in specs:
        logger.info("Demo account %d: %s (balance %d)", spec.id, spec.name, spec.balance)
    return specs


def main(argv: list[str] | None = None, terminal: TerminalIO | None = None) -> int:
    """Run the terminal until shutdown and return a process exit code."""
    args = build_parser().parse_args(argv)
    try:
        config = resolve_config(args)
    except ValueError as e:
        setup_logging()
        logger.error("Invalid environment configuration: %s", e)
        return EXIT_CONFIG_ERROR

    setup_logging(level=config.log_level, format_type=config.log_format)

    try:
        ledger = Ledger.from_specs(load_specs(config))
    except ConfigurationError as e:
        logger.error("Configuration error: %s", e)
        return EXIT_CONFIG_ERROR

    session = Session(ledger, terminal or ConsoleTerminal(), config)
    try:
        session.run()
    except TerminalClosedError:
        logger.info("Input closed, stopping terminal: %s", session.summary())
    except LedgerConsistencyError:
        logger.exception("Terminal aborted")
        return EXIT_INTERNAL_ERROR
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
