"""Allow ``python -m devswiss``."""

import sys

from devswiss.cli import main

if __name__ == "__main__":
    sys.exit(main())
