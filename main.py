import sys

from asteroid_survivor.app import main


if __name__ == "__main__":
    sys.exit(main())
