"""Allow ``python -m lstree``."""

import sys

from lstree.cli import main

sys.exit(main())
