"""Allow ``python -m walktreelib``."""

import sys

from .cli import main

sys.exit(main())
