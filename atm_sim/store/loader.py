"""Read ledger initialization specs from JSON files."""

import json
from pathlib import Path
from typing import Any

from atm_sim.exceptions import ConfigurationError
from atm_sim.models import AccountSpec


def load_account_specs(path: str | Path) -> list[AccountSpec]:
    """Load account specs from a JSON file.

    The file must hold a list of objects with ``name``, ``id`` and
    ``balance`` keys::

        [{"name": "Alice", "id": 1, "balance": 100}]

    Parameters
    ----------
    path : str | Path
        JSON file to read.

    Returns
    -------
    list[AccountSpec]
        Specs in file order. Duplicate ids are left for the ledger to reject.

    Raises
    ------
    ConfigurationError
        If the file is missing or unreadable, is not UTF-8 JSON or has
        malformed entries.
    """
    file_path = Path(path)
    try:
        with open(file_path, encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise ConfigurationError(f"Accounts file {file_path} not found") from e
    except OSError as e:
        raise ConfigurationError(f"Accounts file {file_path} cannot be read: {e}") from e
    except UnicodeDecodeError as e:
        raise ConfigurationError(f"Accounts file {file_path} is not valid UTF-8: {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Accounts file {file_path} is not valid JSON: {e}") from e

    if not isinstance(data, list):
        raise ConfigurationError(f"Accounts file {file_path} must contain a list")

    return [_parse_entry(entry, i) for i, entry in enumerate(data)]


def _parse_entry(entry: Any, index: int) -> AccountSpec:
    """Validate one JSON entry and convert it to an AccountSpec."""
    if not isinstance(entry, dict):
        raise ConfigurationError(f"Account entry {index} must be an object")

    missing = [key for key in ("name", "id", "balance") if key not in entry]
    if missing:
        raise ConfigurationError(f"Account entry {index} missing {', '.join(missing)}")

    name, account_id, balance = entry["name"], entry["id"], entry["balance"]
    if not isinstance(name, str):
        raise ConfigurationError(f"Account entry {index}: name must be a string")
    # bool is an int subclass
    for key, value in (("id", account_id), ("balance", balance)):
        if not isinstance(value, int) or isinstance(value, bool):
            raise ConfigurationError(f"Account entry {index}: {key} must be an integer")

    return AccountSpec(name=name, id=account_id, balance=balance)
