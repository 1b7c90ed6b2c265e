"""Allow ``python -m gitnav`` to run the CLI."""

import sys

from gitnav.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
