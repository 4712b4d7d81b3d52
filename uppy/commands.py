#!/usr/bin/env python3
"""
Command Handlers Module

Runs the upload pipeline: upload, parse, copy to clipboard, offer cleanup.
Each handler reports its own failures and returns False to stop the pipeline.
"""

from typing import Callable, Optional

from .uppy_client import UppyClient, UploadOutcome, OutcomeKind
from .response_parser import parse_response, extract_url, ResponseError
from .clipboard import copy_to_clipboard, ClipboardError
from .cleanup import file_cleanup
from .logging_utils import get_logger
from .utils import print_info, print_success, print_warning, print_error, BLUE, END

logger = get_logger(__name__)


def report_upload_failure(outcome: UploadOutcome) -> None:
    """Print the message matching a failed upload outcome."""
    if outcome.kind is OutcomeKind.IO_FAILURE:
        print_error(
            f"Something went wrong while loading the targeted file: {outcome.reason}"
        )
    elif outcome.kind is OutcomeKind.TRANSPORT_FAILURE:
        print_error(
            f"Something went wrong while sending the HTTP request: {outcome.reason}"
        )
    elif outcome.kind is OutcomeKind.CLIENT_ERROR:
        print_error(f"A HTTP client error occurred, code: {outcome.status}")
    elif outcome.kind is OutcomeKind.SERVER_ERROR:
        print_error(f"A HTTP server error occurred, code: {outcome.status}")


def handle_upload_command(
    client: UppyClient,
    file_path: str,
    input_func: Callable[[], str] = input,
    temp_dir: Optional[str] = None,
) -> bool:
    """
    Upload a file and run the remaining pipeline stages.

    Args:
        client: Upload client for the configured host
        file_path: Absolute path of the file to upload
        input_func: Reads the answer to the deletion prompt
        temp_dir: Destination directory for soft-deleted files

    Returns:
        bool: True if every stage that ran succeeded, including the case
        where the response held no single URL and nothing else was done
    """
    outcome = client.upload_file(file_path)
    if outcome.kind is not OutcomeKind.SUCCESS:
        report_upload_failure(outcome)
        return False

    try:
        parsed = parse_response(outcome.body)
    except ResponseError as e:
        logger.error(f"Unexpected response body: {outcome.body!r}")
        print_error(str(e))
        return False

    url = extract_url(parsed)
    if url is None:
        return True

    print_info(f"Uploaded URL: {BLUE}{url}{END}")
    try:
        copy_to_clipboard(url)
    except ClipboardError as e:
        print_warning(f"Something went wrong while copying URL to clipboard: {e}")
        return False
    print_success("Copied URL to clipboard!")

    return file_cleanup(file_path, input_func=input_func, temp_dir=temp_dir)
