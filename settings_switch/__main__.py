"""Entry point for ``python -m settings_switch``."""

import sys

from .cli import main

sys.exit(main())
