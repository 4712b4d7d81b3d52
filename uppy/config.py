#!/usr/bin/env python3
"""
Configuration management for the uppy uploader.

The configuration lives in a JSON file under the user's profile directory.
It is created from a template on first run and only read afterwards.
"""

import os
import json
from dataclasses import dataclass
from typing import Mapping, Optional

from .logging_utils import get_logger

logger = get_logger(__name__)

CONFIG_SUBDIR = os.path.join(".config", "uppy")
CONFIG_FILE_NAME = "config.json"

# Written on first run, the user fills it in by hand
CONFIG_TEMPLATE = {
    "host": "https://",
    "token": "",
}


class ConfigError(Exception):
    """Raised when the configuration cannot be located, created or read."""


@dataclass(frozen=True)
class Configuration:
    host: str
    token: str


def get_config_dir(environ: Optional[Mapping[str, str]] = None) -> str:
    """
    Resolve the per-user configuration directory.

    Args:
        environ: Environment mapping to read from (default: os.environ)

    Returns:
        str: Path of the form {profile}/.config/uppy

    Raises:
        ConfigError: If no user profile variable is set
    """
    environ = os.environ if environ is None else environ
    profile = environ.get("USERPROFILE") or environ.get("HOME")
    if not profile:
        raise ConfigError(
            "Neither USERPROFILE nor HOME is set, cannot locate the configuration directory"
        )
    return os.path.join(profile, CONFIG_SUBDIR)


def get_config_file(config_dir: str) -> str:
    return os.path.join(config_dir, CONFIG_FILE_NAME)


def bootstrap_config(config_dir: str) -> bool:
    """
    Create the configuration directory and template file on first run.

    Args:
        config_dir: Configuration directory from get_config_dir()

    Returns:
        bool: True if the directory was just created (nothing else should
        happen on this run), False if it already existed

    Raises:
        ConfigError: If the directory or template cannot be written
    """
    if os.path.isdir(config_dir):
        return False

    config_file = get_config_file(config_dir)
    try:
        os.makedirs(config_dir)
        with open(config_file, "w", encoding="utf-8") as f:
            json.dump(CONFIG_TEMPLATE, f, indent=2)
    except OSError as e:
        logger.error(f"Could not create configuration at {config_file}: {e}")
        raise ConfigError(
            f"Failed to write configuration file {config_file}, please create it manually: {e}"
        ) from e

    logger.info(f"Created configuration template at {config_file}")
    return True


def load_config(config_dir: str) -> Configuration:
    """
    Read and validate the configuration file.

    Args:
        config_dir: Configuration directory from get_config_dir()

    Returns:
        Configuration: The host and token to upload with

    Raises:
        ConfigError: If the file is missing, unreadable or malformed
    """
    config_file = get_config_file(config_dir)
    try:
        with open(config_file, "r", encoding="utf-8") as f:
            data = json.load(f)
    except ValueError as e:
        # Covers invalid JSON and bytes that are not UTF-8
        raise ConfigError(f"JSON file is not formatted properly: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read {config_file}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError("JSON file is not formatted properly: expected an object")

    for key in ("host", "token"):
        if not isinstance(data.get(key), str):
            raise ConfigError(
                f"JSON file is not formatted properly: '{key}' must be a string"
            )

    logger.debug(f"Loaded configuration from {config_file} (host: {data['host']})")
    return Configuration(host=data["host"], token=data["token"])
