import sys

from bloomsnake.cli import main

if __name__ == "__main__":
    sys.exit(main())
