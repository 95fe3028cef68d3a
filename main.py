"""Command-line entry point for running from a source checkout."""

import sys

from tlsbootstrap.cli import main

if __name__ == "__main__":
    sys.exit(main())
