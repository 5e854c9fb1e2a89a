#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Reading and validating the service-account credentials file.
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional

from .errors import ReadError, ParseError
from .types import ServiceAccountCredentials


def resolve_credentials_path(
    filename: str | Path,
    base_dir: Optional[str | Path] = None,
    credentials_dir: str = 'credentials'
) -> Path:
    """
    Locate a credentials file under the credentials directory.

    Args:
        filename: Name of the key file (an absolute path is used as-is)
        base_dir: Directory containing the credentials directory (defaults to cwd)
        credentials_dir: Name of the credentials directory

    Returns:
        Path to the credentials file
    """
    filename = Path(filename)
    if filename.is_absolute():
        return filename
    if base_dir is None:
        base_dir = Path.cwd()
    return Path(base_dir) / credentials_dir / filename


def read_credentials_text(path: str | Path) -> str:
    """Read the credentials file as UTF-8 text, raising ReadError on failure."""
    path = Path(path)
    if not path.exists():
        raise ReadError(f"Credentials file not found: {path}")

    try:
        with open(path, 'r', encoding='utf-8') as f:
            return f.read()
    except UnicodeDecodeError as e:
        raise ReadError(f"Credentials file is not UTF-8 text: {path} ({e})") from e
    except OSError as e:
        raise ReadError(f"Could not read credentials file {path}: {e.strerror or e}") from e


def parse_credentials(text: str, source: str = '<string>') -> ServiceAccountCredentials:
    """
    Parse credentials JSON and check the required fields.

    Args:
        text: JSON document text
        source: Label used in error messages

    Returns:
        ServiceAccountCredentials with all ten fields

    Raises:
        ParseError: If the JSON is invalid, not an object, or a required
            field is missing or not a string
    """
    try:
        data: Any = json.loads(text)
    except json.JSONDecodeError as e:
        raise ParseError(f"{source} is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise ParseError(
            f"{source} must contain a JSON object, got {type(data).__name__}"
        )

    _check_fields(data, source)
    return ServiceAccountCredentials.from_dict(data)


def _check_fields(data: Dict[str, Any], source: str) -> None:
    required = ServiceAccountCredentials.field_names()

    missing = [name for name in required if name not in data]
    if missing:
        raise ParseError(f"{source} is missing required field(s): {', '.join(missing)}")

    not_text = [name for name in required if not isinstance(data[name], str)]
    if not_text:
        raise ParseError(f"{source} has non-string value for field(s): {', '.join(not_text)}")


def load_credentials(path: str | Path) -> ServiceAccountCredentials:
    """
    Load a service-account key file.

    Args:
        path: Path to the JSON key file

    Returns:
        ServiceAccountCredentials parsed from the file

    Raises:
        ReadError: If the file is absent or unreadable
        ParseError: If the contents are not a valid credentials object
    """
    text = read_credentials_text(path)
    return parse_credentials(text, source=str(path))
