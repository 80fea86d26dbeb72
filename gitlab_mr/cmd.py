"""Subprocess execution primitive."""

import subprocess
from dataclasses import dataclass
from pathlib import Path

from gitlab_mr.logging import log_git_command


@dataclass
class CommandResult:
    """Captured outcome of an external command."""

    stdout: str
    stderr: str
    returncode: int

    @property
    def success(self) -> bool:
        return self.returncode == 0


def run_command(cmd: list[str], cwd: str | Path | None = None) -> CommandResult:
    """
    Run a command and capture its output.

    Never raises on a non-zero exit status; callers decide whether a failure
    matters. A missing executable is reported as exit status 127.
    """
    try:
        completed = subprocess.run(
            cmd,
            cwd=cwd,
            capture_output=True,
            text=True,
        )
    except FileNotFoundError as e:
        result = CommandResult(stdout="", stderr=str(e), returncode=127)
    else:
        result = CommandResult(
            stdout=completed.stdout,
            stderr=completed.stderr,
            returncode=completed.returncode,
        )

    log_git_command(cmd, result.returncode, result.stderr)
    return result
