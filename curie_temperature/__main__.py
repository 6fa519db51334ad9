import sys

from curie_temperature.cli import main

if __name__ == "__main__":
    sys.exit(main())
