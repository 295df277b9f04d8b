"""Allow ``python -m estate_sim``."""

import sys

from estate_sim.cli.main import main

if __name__ == "__main__":
    sys.exit(main())
