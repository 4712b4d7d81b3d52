#!/usr/bin/env python3
"""
Decoding of the upload response body.
"""

import json
from dataclasses import dataclass, field
from typing import List, Optional

from .logging_utils import get_logger

logger = get_logger(__name__)


class ResponseError(Exception):
    """Raised when the upload response body is not the expected JSON."""


@dataclass
class ParsedResponse:
    files: List[str] = field(default_factory=list)


def parse_response(body: str) -> ParsedResponse:
    """
    Decode a response body of the form {"files": ["<url>", ...]}.

    Raises:
        ResponseError: If the body is not JSON or has the wrong shape
    """
    try:
        data = json.loads(body)
    except (TypeError, ValueError) as e:
        raise ResponseError(f"Failed to deserialise JSON response: {e}") from e

    files = data.get("files") if isinstance(data, dict) else None
    if not isinstance(files, list) or not all(isinstance(f, str) for f in files):
        raise ResponseError(
            "Failed to deserialise JSON response: expected a 'files' list of strings"
        )

    return ParsedResponse(files=files)


def extract_url(parsed: ParsedResponse) -> Optional[str]:
    """
    Take the uploaded URL out of a parsed response.

    Returns None unless the response holds exactly one URL.
    """
    if len(parsed.files) != 1:
        logger.debug(f"Response holds {len(parsed.files)} URLs, nothing to copy")
        return None
    return parsed.files.pop()
