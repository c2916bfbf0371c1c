"""Allow ``python -m conlang``."""

import sys

from conlang.cli import main

if __name__ == '__main__':
    sys.exit(main())
