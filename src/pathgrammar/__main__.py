"""Allow ``python -m pathgrammar``."""

import sys

from pathgrammar.ui.cli.cli import main

if __name__ == "__main__":
    sys.exit(main())
