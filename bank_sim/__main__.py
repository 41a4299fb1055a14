"""Allow ``python -m bank_sim``."""

import sys

from bank_sim.cli import main

sys.exit(main())
