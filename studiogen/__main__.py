# studiogen/__main__.py
import sys

from studiogen.cli import main

if __name__ == "__main__":
    sys.exit(main())
