"""Allow ``python -m hextocolor``."""

import sys

from hextocolor.cli import main

sys.exit(main())
