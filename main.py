import sys

from src.dary_heap.cli import main


if __name__ == "__main__":
    sys.exit(main())
