#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Vercel Env Setup Package

Turns a Google service-account key file into `vercel env add` commands
for the GOOGLE_* environment variables.
"""

from .types import (
    ServiceAccountCredentials,
    EnvVar,
    CredentialMapping
)
from .errors import (
    CredentialError,
    ReadError,
    ParseError
)
from .loader import (
    load_credentials,
    parse_credentials,
    resolve_credentials_path
)
from .mapping import FIELD_ENV_TABLE, build_mapping
from .formatter import (
    escape_value,
    preview_value,
    format_preview_line,
    format_command_line,
    print_preview,
    print_commands
)
from .logger import RunLogger

__version__ = "1.0.0"

__all__ = [
    # Types
    "ServiceAccountCredentials",
    "EnvVar",
    "CredentialMapping",

    # Errors
    "CredentialError",
    "ReadError",
    "ParseError",

    # Loading
    "load_credentials",
    "parse_credentials",
    "resolve_credentials_path",

    # Mapping
    "FIELD_ENV_TABLE",
    "build_mapping",

    # Output
    "escape_value",
    "preview_value",
    "format_preview_line",
    "format_command_line",
    "print_preview",
    "print_commands",

    # Components
    "RunLogger",
]
