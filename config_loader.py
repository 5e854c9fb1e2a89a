#!/usr/bin/env python3
"""
Lightweight YAML configuration loader with sensible defaults.

Can also be run as a CLI tool to print the resolved settings:

Usage:
  python3 config_loader.py [path/to/config.yml]
"""

import sys
from pathlib import Path
from typing import Any, Dict, Optional

import yaml


DEFAULTS: Dict[str, Any] = {
    'credentials': {
        'dir': 'credentials',
        'file': 'service-account.json',
    },
    'deploy': {
        'command': 'npx vercel',
        'environment': 'production',
    },
    'preview': {
        'max_length': 50,
    },
    'logging': {
        'enabled': False,
        'dir': 'logs',
    },
}


def _deep_get(d: Dict[str, Any], path: str, default: Any = None) -> Any:
    """Fetch nested key via dot.path with default."""
    cur: Any = d
    for part in path.split('.'):
        if not isinstance(cur, dict) or part not in cur:
            return default
        cur = cur[part]
    return cur


def get_setting(cfg: Dict[str, Any], path: str) -> Any:
    """Look up a dotted key in cfg, falling back to DEFAULTS."""
    value = _deep_get(cfg, path)
    if value is None:
        return _deep_get(DEFAULTS, path)
    return value


def load_config(config_path: str | Path | None = None) -> Dict[str, Any]:
    """
    Load YAML config. If not provided, searches `config.yml` in the current
    directory, then in project root.

    A missing default `config.yml` yields an empty dict (all defaults apply);
    an explicit path that does not exist is an error.
    """
    if config_path is None:
        candidates = [Path.cwd() / 'config.yml', Path(__file__).resolve().parent / 'config.yml']
        config_path = next((p for p in candidates if p.exists()), None)
        if config_path is None:
            return {}
    else:
        config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f) or {}
    return data


def as_settings(cfg: Dict[str, Any]) -> Dict[str, Any]:
    """
    Flatten the config into the settings the env setup tool uses.

    Args:
        cfg: The configuration dictionary

    Returns:
        Dict with credentials_dir, credentials_file, deploy_command,
        environment, preview_length, log_enabled, log_dir
    """
    return {
        'credentials_dir': str(get_setting(cfg, 'credentials.dir')),
        'credentials_file': str(get_setting(cfg, 'credentials.file')),
        'deploy_command': str(get_setting(cfg, 'deploy.command')),
        'environment': str(get_setting(cfg, 'deploy.environment')),
        'preview_length': int(get_setting(cfg, 'preview.max_length')),
        'log_enabled': get_setting(cfg, 'logging.enabled') is True,
        'log_dir': str(get_setting(cfg, 'logging.dir')),
    }


def main() -> None:
    """CLI entry point for printing the resolved settings."""
    config_path = sys.argv[1] if len(sys.argv) > 1 else None
    try:
        cfg = load_config(config_path)
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    for key, value in as_settings(cfg).items():
        print(f"{key}: {value}")


if __name__ == "__main__":
    main()
