"""Subprocess execution with Result-based error handling.

Two flavours, matching how release commands talk to the terminal:

- ``run`` captures stdout/stderr (git diff, publish) so the caller can
  inspect them.
- ``run_live`` inherits the terminal (build, changelog, commit, push) so
  the operator sees tool output as it happens.

Neither applies a timeout; a release waits for its tools.

Usage:
    match run(["git", "diff"], cwd=package_dir):
        case Ok(stdout):
            has_changes = bool(stdout)
        case Err(error):
            console.error(str(error))
"""

from __future__ import annotations

import subprocess
from dataclasses import dataclass
from pathlib import Path

from pubkit.core.result import Err, Ok, Result

__all__ = ["ProcessError", "run", "run_live"]


@dataclass(frozen=True, slots=True)
class ProcessError:
    """Error from a failed subprocess execution.

    Attributes:
        command: The command that was executed.
        returncode: Exit code, or -1 if the process could not be started.
        stdout: Captured standard output (empty for live runs).
        stderr: Captured standard error, or the OS error message.
    """

    command: tuple[str, ...]
    returncode: int
    stdout: str
    stderr: str

    def __str__(self) -> str:
        cmd_str = " ".join(self.command[:3])
        if len(self.command) > 3:
            cmd_str += " ..."
        return f"{cmd_str} failed (exit {self.returncode})"


def run(cmd: list[str], cwd: Path) -> Result[str, ProcessError]:
    """Execute a command, capturing its output.

    Returns:
        Ok(stdout) on exit 0, Err(ProcessError) otherwise.
    """
    try:
        proc = subprocess.run(
            cmd,
            cwd=str(cwd),
            capture_output=True,
            text=True,
            check=False,
        )
    except OSError as e:
        return Err(ProcessError(command=tuple(cmd), returncode=-1, stdout="", stderr=str(e)))

    if proc.returncode != 0:
        return Err(
            ProcessError(
                command=tuple(cmd),
                returncode=proc.returncode,
                stdout=proc.stdout,
                stderr=proc.stderr,
            )
        )

    return Ok(proc.stdout)


def run_live(cmd: list[str], cwd: Path) -> Result[None, ProcessError]:
    """Execute a command attached to the current terminal.

    Output streams straight to the operator, so a failure carries only the
    exit code.
    """
    try:
        proc = subprocess.run(cmd, cwd=str(cwd), check=False)
    except OSError as e:
        return Err(ProcessError(command=tuple(cmd), returncode=-1, stdout="", stderr=str(e)))

    if proc.returncode != 0:
        return Err(
            ProcessError(command=tuple(cmd), returncode=proc.returncode, stdout="", stderr="")
        )

    return Ok(None)
