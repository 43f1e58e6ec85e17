import sys

from .md_stats import main

if __name__ == "__main__":
    sys.exit(main())
