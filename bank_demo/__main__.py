import sys

from bank_demo.cli import main

sys.exit(main())
