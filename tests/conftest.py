#!/usr/bin/env python3
"""Pytest configuration and shared fixtures."""

import os
import sys
import json
import tempfile
import pytest
from unittest.mock import Mock

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from uppy.config import Configuration, CONFIG_SUBDIR, CONFIG_FILE_NAME
from uppy.uppy_client import UppyClient


@pytest.fixture
def config():
    """A filled-in configuration."""
    return Configuration(host="https://h.example", token="T")


@pytest.fixture
def client(config):
    """Create an UppyClient instance for testing."""
    return UppyClient(config)


@pytest.fixture
def temp_file():
    """Create a temporary file for upload testing."""
    fd, path = tempfile.mkstemp(suffix=".txt")
    os.write(fd, b"Test file content for upload testing")
    os.close(fd)
    yield path
    if os.path.exists(path):
        os.unlink(path)


@pytest.fixture
def report_file(tmp_path):
    """The 10-byte report.pdf used by the end-to-end scenarios."""
    path = tmp_path / "report.pdf"
    path.write_bytes(b"0123456789")
    return path


@pytest.fixture
def trash_dir(tmp_path):
    """Directory standing in for the OS temp directory."""
    path = tmp_path / "trash"
    path.mkdir()
    return path


@pytest.fixture
def profile_dir(tmp_path, monkeypatch):
    """A user profile directory with a filled-in uppy configuration."""
    profile = tmp_path / "profile"
    config_dir = profile / CONFIG_SUBDIR
    config_dir.mkdir(parents=True)
    (config_dir / CONFIG_FILE_NAME).write_text(
        json.dumps({"host": "https://h.example", "token": "T"}), encoding="utf-8"
    )
    monkeypatch.setenv("USERPROFILE", str(profile))
    return profile


@pytest.fixture
def make_response():
    """Factory for mocked requests.Response objects."""

    def _make(status_code=200, text="", reason="OK"):
        response = Mock()
        response.status_code = status_code
        response.text = text
        response.reason = reason
        return response

    return _make
