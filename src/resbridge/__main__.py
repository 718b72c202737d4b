"""Allow running as ``python -m resbridge``."""

import sys

from resbridge.cli import main

sys.exit(main())
