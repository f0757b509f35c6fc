"""Allow ``python -m setalgebra``."""

import sys

from setalgebra.cli import main

sys.exit(main())
