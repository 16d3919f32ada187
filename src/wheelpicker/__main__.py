"""Command-line interface."""
import sys

from wheelpicker.app.main import main

if __name__ == "__main__":
    sys.exit(main())
