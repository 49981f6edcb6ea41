"""Subprocess helpers."""

from __future__ import annotations

import logging
import subprocess  # noqa: S404

logger = logging.getLogger(__name__)


class ProcessRunner:
    """Utility for running subprocess commands."""

    def run(
        self,
        cmd: list[str],
        cwd: str | None = None,
        capture_output: bool = False,
        check: bool = True,
        **kwargs,
    ) -> subprocess.CompletedProcess:
        """Run a subprocess command with standard options."""
        logger.debug("Running: %s", " ".join(cmd))
        return subprocess.run(  # noqa: S603
            cmd,
            cwd=cwd,
            capture_output=capture_output,
            check=check,
            **kwargs,
        )

    def output(self, cmd: list[str]) -> str:
        """Run a command and return its stripped standard output."""
        result = self.run(cmd, capture_output=True, text=True)
        return result.stdout.strip()
