"""Allow ``python -m deployvalues``."""

import sys

from deployvalues.cli import main

sys.exit(main())
