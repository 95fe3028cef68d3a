"""Allow running the generator with ``python -m tlsbootstrap``."""

import sys

from tlsbootstrap.cli import main

if __name__ == "__main__":
    sys.exit(main())
