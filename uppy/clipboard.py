#!/usr/bin/env python3
"""
Clipboard access for the uppy uploader.
"""

import pyperclip

from .logging_utils import get_logger

logger = get_logger(__name__)


class ClipboardError(Exception):
    """Raised when text cannot be placed on the system clipboard."""


def copy_to_clipboard(text: str) -> None:
    """
    Replace the clipboard contents with the given Unicode text.

    Raises:
        ClipboardError: If no clipboard mechanism is available or the copy fails
    """
    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as e:
        logger.error(f"Clipboard write failed: {e}")
        raise ClipboardError(str(e)) from e
    logger.debug(f"Copied {text} to clipboard")
