"""Entry point for running the emitter driver as a module.

This file allows the script driver to be run with: python -m emitter
"""

import sys

from emitter.app import main

if __name__ == "__main__":
    sys.exit(main())
