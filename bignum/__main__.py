"""Allow ``python -m bignum``."""

import sys

from bignum.cli import main

if __name__ == "__main__":
    sys.exit(main())
