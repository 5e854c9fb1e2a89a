#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Preview and command-line output for the environment variable mapping.
"""

from typing import Optional, TextIO

from .types import CredentialMapping

PREVIEW_LENGTH = 50
DEPLOY_COMMAND = 'npx vercel'
ENVIRONMENT = 'production'

PREVIEW_HEADER = 'Environment variables to set:'
COMMANDS_HEADER = 'Run these Vercel commands manually:'


def escape_value(value: str) -> str:
    """Escape double quotes so the value can sit inside a double-quoted shell string."""
    return value.replace('"', '\\"')


def preview_value(value: str, max_length: int = PREVIEW_LENGTH) -> str:
    """Truncate value to max_length characters, marking the cut with '...'."""
    if len(value) > max_length:
        return value[:max_length] + '...'
    return value


def format_preview_line(name: str, value: str, max_length: int = PREVIEW_LENGTH) -> str:
    return f"{name}: {preview_value(value, max_length)}"


def format_command_line(
    name: str,
    value: str,
    command: str = DEPLOY_COMMAND,
    environment: str = ENVIRONMENT
) -> str:
    """
    Build the `env add` command for one variable.

    Args:
        name: Environment variable name
        value: Untruncated value
        command: Deployment CLI invocation (e.g. "npx vercel")
        environment: Target deployment environment

    Returns:
        Command line ready to paste into a shell
    """
    return f'{command} env add {name} --value="{escape_value(value)}" --environment={environment}'


def print_preview(
    mapping: CredentialMapping,
    max_length: int = PREVIEW_LENGTH,
    file: Optional[TextIO] = None
) -> None:
    print(PREVIEW_HEADER, file=file)
    for entry in mapping:
        print(format_preview_line(entry.name, entry.value, max_length), file=file)


def print_commands(
    mapping: CredentialMapping,
    command: str = DEPLOY_COMMAND,
    environment: str = ENVIRONMENT,
    file: Optional[TextIO] = None
) -> None:
    print(f"\n{COMMANDS_HEADER}", file=file)
    for entry in mapping:
        print(format_command_line(entry.name, entry.value, command, environment), file=file)
