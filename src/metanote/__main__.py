"""Allow ``python -m metanote``."""

import sys

from metanote.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
