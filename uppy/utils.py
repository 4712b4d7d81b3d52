#!/usr/bin/env python3
"""
Console helpers for the uppy uploader.
"""

import sys

BLUE = "\033[94m"
GREEN = "\033[92m"
YELLOW = "\033[93m"
RED = "\033[91m"
END = "\033[0m"


def print_info(message: str) -> None:
    """Print an informational message to stdout."""
    print(message)


def print_success(message: str) -> None:
    """Print a success message to stdout."""
    print(f"{GREEN}{message}{END}")


def print_warning(message: str) -> None:
    """Print a warning to stderr."""
    print(f"{YELLOW}{message}{END}", file=sys.stderr)


def print_error(message: str) -> None:
    """Print an error to stderr."""
    print(f"{RED}{message}{END}", file=sys.stderr)
