#!/usr/bin/env python3
"""
Upload API client.

Sends a single file to {host}/api/upload and classifies the result into
exactly one UploadOutcome.
"""

import os
import mimetypes
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional

import requests
from requests_toolbelt import MultipartEncoder

from .config import Configuration
from .logging_utils import get_logger

logger = get_logger(__name__)

UPLOAD_ENDPOINT = "/api/upload"


class OutcomeKind(Enum):
    SUCCESS = "success"
    IO_FAILURE = "io_failure"
    TRANSPORT_FAILURE = "transport_failure"
    CLIENT_ERROR = "client_error"
    SERVER_ERROR = "server_error"


@dataclass(frozen=True)
class UploadOutcome:
    """
    Result of one upload attempt.

    Only the fields matching ``kind`` are set: ``body`` for SUCCESS,
    ``reason`` for IO_FAILURE and TRANSPORT_FAILURE, ``status_code`` (and the
    HTTP reason phrase in ``reason``) for CLIENT_ERROR and SERVER_ERROR.
    """

    kind: OutcomeKind
    body: Optional[str] = None
    reason: Optional[str] = None
    status_code: Optional[int] = None

    @classmethod
    def success(cls, body: str) -> "UploadOutcome":
        return cls(OutcomeKind.SUCCESS, body=body)

    @classmethod
    def io_failure(cls, reason: str) -> "UploadOutcome":
        return cls(OutcomeKind.IO_FAILURE, reason=reason)

    @classmethod
    def transport_failure(cls, reason: str) -> "UploadOutcome":
        return cls(OutcomeKind.TRANSPORT_FAILURE, reason=reason)

    @classmethod
    def client_error(cls, status_code: int, reason: str = "") -> "UploadOutcome":
        return cls(OutcomeKind.CLIENT_ERROR, status_code=status_code, reason=reason)

    @classmethod
    def server_error(cls, status_code: int, reason: str = "") -> "UploadOutcome":
        return cls(OutcomeKind.SERVER_ERROR, status_code=status_code, reason=reason)

    @property
    def status(self) -> str:
        """Status code with its reason phrase, e.g. '404 Not Found'."""
        if self.status_code is None:
            return ""
        return f"{self.status_code} {self.reason}".strip()


def construct_headers(config: Configuration) -> Dict[str, str]:
    """
    Build the headers sent with every upload.

    The token is used as the full Authorization value, no scheme is added.
    """
    return {
        "Authorization": config.token,
        "Format": "RANDOM",
        "Embed": "true",
    }


class UppyClient:
    """Client for the upload endpoint of a configured host."""

    def __init__(self, config: Configuration):
        """
        Initialize the client.

        Args:
            config: Host and token to upload with
        """
        self.session = requests.Session()
        self.config = config

    @property
    def upload_url(self) -> str:
        return f"{self.config.host}{UPLOAD_ENDPOINT}"

    def _build_form(self, file_path: str) -> MultipartEncoder:
        """
        Load the whole file into a single-field multipart body.

        Raises:
            OSError: If the path is not a readable regular file
        """
        if not os.path.isfile(file_path):
            raise FileNotFoundError(f"Not a regular file: {file_path}")

        file_name = os.path.basename(file_path)
        mime_type = mimetypes.guess_type(file_name)[0] or "application/octet-stream"
        logger.debug(f"Using MIME type {mime_type} for file {file_name}")

        with open(file_path, "rb") as file_obj:
            content = file_obj.read()

        return MultipartEncoder(fields={"file": (file_name, content, mime_type)})

    def upload_file(
        self, file_path: str, headers: Optional[Dict[str, str]] = None
    ) -> UploadOutcome:
        """
        Upload a file and classify the response.

        Args:
            file_path: Absolute path of the file to upload
            headers: Request headers (default: construct_headers(self.config))

        Returns:
            UploadOutcome: Exactly one outcome, never raises for I/O,
            transport or HTTP status failures
        """
        if headers is None:
            headers = construct_headers(self.config)

        try:
            encoder = self._build_form(file_path)
        except OSError as e:
            logger.error(f"Failed to load {file_path}: {e}")
            return UploadOutcome.io_failure(str(e))

        url = self.upload_url
        logger.info(f"Uploading {file_path} to {url}")

        try:
            response = self.session.post(
                url,
                data=encoder,
                headers={**headers, "Content-Type": encoder.content_type},
            )
        except (requests.exceptions.RequestException, UnicodeError) as e:
            # UnicodeError: header values http.client cannot encode
            logger.error(f"HTTP request to {url} failed: {e}")
            return UploadOutcome.transport_failure(str(e))

        status_code = response.status_code
        logger.debug(f"Upload response status: {status_code}")

        if 400 <= status_code < 500:
            return UploadOutcome.client_error(status_code, response.reason or "")
        if 500 <= status_code < 600:
            return UploadOutcome.server_error(status_code, response.reason or "")

        return UploadOutcome.success(response.text)
