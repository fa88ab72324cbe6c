"""
Entrypoint module, in case you use `python -m seqmetrics`.
"""

import sys

from seqmetrics.cli import main

if __name__ == "__main__":
    sys.exit(main())
