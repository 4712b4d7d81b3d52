#!/usr/bin/env python3
"""
uppy - Command Line Interface

Uploads a file, copies the returned URL to the clipboard and offers to
soft-delete the local copy.
"""

import os
import sys
import argparse

from . import __version__
from .uppy_client import UppyClient
from .logging_utils import setup_logging, get_logger
from .config import (
    ConfigError,
    bootstrap_config,
    get_config_dir,
    get_config_file,
    load_config,
)
from .commands import handle_upload_command
from .utils import print_info, print_error

logger = get_logger(__name__)


def _create_argument_parser() -> argparse.ArgumentParser:
    """
    Create and configure the argument parser.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        prog="uppy",
        description="Upload a file, copy its URL to the clipboard and optionally move the local copy to the temp directory",
    )
    parser.add_argument("file", help="Path to the file you want to upload")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Show verbose output"
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    return parser


def main(argv=None) -> int:
    """Parse arguments, load the configuration and run the upload pipeline."""
    parser = _create_argument_parser()
    args = parser.parse_args(argv)

    setup_logging(verbose=args.verbose)

    try:
        config_dir = get_config_dir()
        if bootstrap_config(config_dir):
            print_info("Configuration directory created in .config")
            print_info(
                f"Fill in the host and token in {get_config_file(config_dir)} and run uppy again"
            )
            return 0
        config = load_config(config_dir)
    except ConfigError as e:
        logger.error(f"Configuration error: {e}")
        print_error(f"Error reading configuration file: {e}")
        return 1

    try:
        target_file = os.path.join(os.getcwd(), args.file)
    except OSError as e:
        print_error(f"Error resolving the current directory: {e}")
        return 1

    client = UppyClient(config)
    return 0 if handle_upload_command(client, target_file) else 1


if __name__ == "__main__":
    sys.exit(main())
