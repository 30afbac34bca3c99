"""
studiogen entry point.
Thin launcher for running from a checkout without installing.
No business logic here.
"""
import sys

from studiogen.cli import main

if __name__ == "__main__":
    sys.exit(main())
