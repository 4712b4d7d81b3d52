#!/usr/bin/env python3
"""
Logging utilities for the uppy uploader.
Provides a rotating file logger with optional console output.
"""

import os
import sys
import logging
import tempfile
from logging.handlers import RotatingFileHandler

from .utils import print_warning

LOG_BASENAME = "uppy"
MAX_LOG_BYTES = 5 * 1024 * 1024
MAX_LOG_BACKUPS = 10


def setup_logging(
    log_folder=None,
    log_basename=LOG_BASENAME,
    max_bytes=MAX_LOG_BYTES,
    backup_count=MAX_LOG_BACKUPS,
    verbose=False,
):
    """
    Configure a rotating file logger, mirrored to the console in verbose mode.

    Args:
        log_folder: Folder where log files will be stored (default: OS temp directory)
        log_basename: Base name for log files (default: 'uppy')
        max_bytes: Maximum size of the log file before rotation in bytes (default: 5MB)
        backup_count: Number of backup files to keep (default: 10)
        verbose: Whether to also print log records to the console

    Returns:
        The configured root logger
    """
    logger = logging.getLogger()
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)

    # Clear existing handlers to avoid duplication
    logger.handlers = []

    log_folder = log_folder or tempfile.gettempdir()
    log_file = os.path.join(log_folder, f"{log_basename}_0.log")
    try:
        file_handler = RotatingFileHandler(
            log_file, maxBytes=max_bytes, backupCount=backup_count
        )
    except OSError as e:
        print_warning(f"Warning: Could not open log file {log_file}: {e}")
    else:
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")
        )
        logger.addHandler(file_handler)

    # User-facing messages are printed directly, the console only gets records on -v
    if verbose:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(logging.DEBUG)
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(console_handler)

    return logger


def get_logger(name):
    """
    Get a named logger.

    Args:
        name: The name for the logger

    Returns:
        A named logger
    """
    return logging.getLogger(name)
