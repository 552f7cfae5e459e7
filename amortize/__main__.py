"""Allow ``python -m amortize``."""

import sys

from amortize.cli import main

if __name__ == "__main__":
    sys.exit(main())
