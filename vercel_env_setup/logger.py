#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Markdown run log for env setup runs.
"""

from pathlib import Path
from datetime import datetime
from typing import Optional

from .types import CredentialMapping


class RunLogger:
    """Logs each env setup run to a markdown file. Values are never written."""

    def __init__(self, log_dir: str = "logs"):
        """
        Initialize run logger.

        Args:
            log_dir: Directory to store log files
        """
        self.log_dir = Path(log_dir)
        self.log_dir.mkdir(parents=True, exist_ok=True)

    def log_run(
        self,
        credentials_path: str,
        mapping: CredentialMapping,
        command: str,
        environment: str,
        timestamp: Optional[datetime] = None
    ) -> Path:
        """
        Write a markdown record of one run.

        Args:
            credentials_path: Path of the credentials file that was read
            mapping: The variables that were emitted
            command: Deployment CLI invocation used in the commands
            environment: Target deployment environment
            timestamp: Run time (defaults to now)

        Returns:
            Path to the written log file
        """
        if timestamp is None:
            timestamp = datetime.now()
        log_file = self.log_dir / f"setup_env_{timestamp.strftime('%Y%m%d_%H%M%S_%f')}.md"

        with open(log_file, 'w', encoding='utf-8') as f:
            f.write("# Env Setup Log\n\n")
            f.write(f"**Timestamp:** {timestamp.strftime('%Y-%m-%d %H:%M:%S')}\n")
            f.write(f"**Credentials File:** `{credentials_path}`\n")
            f.write(f"**Command:** `{command}`\n")
            f.write(f"**Environment:** {environment}\n\n")
            self._write_variables_table(f, mapping)

        return log_file

    def _write_variables_table(self, f, mapping: CredentialMapping) -> None:
        f.write("## Variables\n\n")
        f.write("| Variable | Length |\n")
        f.write("|----------|--------|\n")
        for entry in mapping:
            f.write(f"| {entry.name} | {len(entry.value)} |\n")
        f.write("\n")
