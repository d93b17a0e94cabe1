"""
Main CLI entry point for AdaptiveDrive.
"""

import sys
from typing import List, Optional

from .cli_interface import CLIInterface


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    return CLIInterface().run(argv)


if __name__ == "__main__":
    sys.exit(main())
