"""Allow running as ``python -m ptyguard``."""

import sys

from ptyguard.cli import main

if __name__ == "__main__":
    sys.exit(main())
