"""Allow running hostmap as ``python -m hostmap``."""

import sys

from hostmap.infrastructure.cli.app import main

if __name__ == "__main__":
    sys.exit(main())
