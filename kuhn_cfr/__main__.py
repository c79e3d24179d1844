import sys

from kuhn_cfr.cli import main

if __name__ == "__main__":
    sys.exit(main())
