#!/usr/bin/env python3
"""
Post-upload cleanup.

Asks once whether the uploaded file should be removed and, on consent,
soft-deletes it by renaming it into the OS temp directory under its MD5
digest. The content stays recoverable from there.
"""

import os
import hashlib
import tempfile
from enum import Enum
from typing import Callable, Optional

from .logging_utils import get_logger
from .utils import print_info, print_success, print_error

logger = get_logger(__name__)

HASH_CHUNK_SIZE = 1024
TEMP_SUFFIX = ".tmp"
DELETE_PROMPT = "Would you like to delete the file? (Y/N)"


class DeletionChoice(Enum):
    YES = "yes"
    NO = "no"
    INVALID = "invalid"


def parse_choice(answer: str) -> DeletionChoice:
    answer = answer.strip().lower()
    if answer in ("yes", "y"):
        return DeletionChoice.YES
    if answer in ("no", "n"):
        return DeletionChoice.NO
    return DeletionChoice.INVALID


def prompt_deletion_choice(input_func: Callable[[], str] = input) -> DeletionChoice:
    """
    Ask the user once whether to delete the file.

    End of input or Ctrl+C cancels the prompt and counts as a refusal.
    """
    print_info(DELETE_PROMPT)
    try:
        answer = input_func()
    except (KeyboardInterrupt, EOFError):
        print_info("\nOperation cancelled.")
        return DeletionChoice.NO
    return parse_choice(answer)


def compute_md5(file_path: str, chunk_size: int = HASH_CHUNK_SIZE) -> str:
    """
    Compute the MD5 hex digest of a file, reading it in fixed-size chunks.

    Args:
        file_path: File to hash
        chunk_size: Number of bytes read per iteration

    Returns:
        str: Lowercase hex digest
    """
    digest = hashlib.md5()
    with open(file_path, "rb") as f:
        for chunk in iter(lambda: f.read(chunk_size), b""):
            digest.update(chunk)
    return digest.hexdigest()


def soft_delete(file_path: str, temp_dir: Optional[str] = None) -> str:
    """
    Move a file to {temp_dir}/{md5}.tmp by renaming it.

    Args:
        file_path: File to remove
        temp_dir: Destination directory (default: tempfile.gettempdir())

    Returns:
        str: Path the file was moved to

    Raises:
        OSError: If hashing or the rename fails; the original is left in place
    """
    temp_dir = temp_dir or tempfile.gettempdir()
    destination = os.path.join(temp_dir, compute_md5(file_path) + TEMP_SUFFIX)
    # os.replace renames in place and overwrites an earlier copy of the same content
    os.replace(file_path, destination)
    logger.info(f"Moved {file_path} to {destination}")
    return destination


def file_cleanup(
    file_path: str,
    input_func: Callable[[], str] = input,
    temp_dir: Optional[str] = None,
) -> bool:
    """
    Offer to soft-delete the uploaded file.

    Args:
        file_path: The file that was uploaded
        input_func: Reads one line of user input
        temp_dir: Destination directory for soft-deleted files

    Returns:
        bool: False if the answer was invalid or the file could not be moved
    """
    choice = prompt_deletion_choice(input_func)
    logger.debug(f"Deletion choice for {file_path}: {choice.value}")

    if choice is DeletionChoice.NO:
        return True

    if choice is DeletionChoice.INVALID:
        print_error("Invalid choice")
        return False

    try:
        soft_delete(file_path, temp_dir)
    except OSError as e:
        logger.error(f"Could not move {file_path} to the temp dir: {e}")
        print_error(f"Something went wrong while moving the file to the temp dir: {e}")
        return False

    print_success("File deleted!")
    return True
