"""Allow ``python -m orgwriter``."""

import sys

from orgwriter.cli import main

if __name__ == "__main__":
    sys.exit(main())
