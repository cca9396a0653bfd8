"""Allow ``python -m dilemma``."""

import sys

from dilemma.cli import main

sys.exit(main())
