"""Entry point for `python -m termdatepicker`."""

import asyncio
import sys

from termdatepicker.cli import main_entry


def main() -> None:
    """Run the demo host and exit with its status code."""
    try:
        exit_code = asyncio.run(main_entry())
        sys.exit(exit_code)
    except KeyboardInterrupt:
        print("Operation cancelled by user")
        sys.exit(130)


if __name__ == "__main__":
    main()
