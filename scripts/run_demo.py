#!/usr/bin/env python3
"""Run the banking demo.

Creates one customer with a savings and a current account, performs a fixed
sequence of deposits, withdrawals and interest, then prints the balances and
transaction histories.
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from bank_demo.cli import main

if __name__ == "__main__":
    sys.exit(main())
