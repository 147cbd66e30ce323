import sys

from yomiage.cli import main

if __name__ == "__main__":
    sys.exit(main())
