"""Allow running as ``python -m oulipy``."""

import sys

from oulipy.cli import main

sys.exit(main())
