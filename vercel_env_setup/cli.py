#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Command-line entry point: print the Vercel env commands for a service-account key.

Usage:
  setup-vercel-env [credentials-file]

The key file is looked up under `credentials/` in the current directory.
Defaults come from config.yml (see config.example.yml).
"""

import sys
from pathlib import Path
from typing import List, Optional

from config_loader import load_config, as_settings
from .errors import CredentialError
from .formatter import print_preview, print_commands
from .loader import load_credentials, resolve_credentials_path
from .logger import RunLogger
from .mapping import build_mapping

USAGE = "usage: setup-vercel-env [-h] [credentials-file]"


def main(argv: Optional[List[str]] = None, config_path: Optional[str | Path] = None) -> None:
    """
    Load the credentials, then print the preview and the command lines.

    Args:
        argv: Command-line arguments without the program name (defaults to sys.argv[1:])
        config_path: Optional YAML config path (defaults to config.yml in the current directory or project root)
    """
    args = sys.argv[1:] if argv is None else list(argv)

    if any(arg in ('-h', '--help') for arg in args):
        print(__doc__.strip())
        sys.exit(0)
    if len(args) > 1:
        print(USAGE, file=sys.stderr)
        sys.exit(2)

    settings = as_settings(load_config(config_path))
    filename = args[0] if args else settings['credentials_file']
    path = resolve_credentials_path(filename, credentials_dir=settings['credentials_dir'])

    try:
        credentials = load_credentials(path)
    except CredentialError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    mapping = build_mapping(credentials)

    print_preview(mapping, max_length=settings['preview_length'])
    print_commands(
        mapping,
        command=settings['deploy_command'],
        environment=settings['environment']
    )

    if settings['log_enabled']:
        RunLogger(settings['log_dir']).log_run(
            str(path),
            mapping,
            command=settings['deploy_command'],
            environment=settings['environment']
        )


if __name__ == "__main__":
    main()
