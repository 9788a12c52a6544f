#!/usr/bin/env python3
"""Run the ATM terminal on the console.

Examples::

    python scripts/run_atm.py --demo-accounts 3 --seed 42
    python scripts/run_atm.py --accounts accounts.json --allow-overdraft
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from atm_sim.cli import main

if __name__ == "__main__":
    sys.exit(main())
