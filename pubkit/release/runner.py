"""Command runners: the seam between a release and the outside world.

The orchestrator holds two runners. Commands that must happen even in a
dry run (build, changelog, git diff) go through the live runner; commands
that change shared state (commit, tag, publish, push) go through whichever
runner ``select_runner`` picked at startup.
"""

from __future__ import annotations

import shlex
from pathlib import Path
from typing import Protocol

from pubkit.core.result import Ok, Result
from pubkit.output.console import ConsoleProtocol, Style
from pubkit.platform.process import ProcessError, run, run_live

__all__ = ["CommandRunner", "DryRunner", "LiveRunner", "select_runner"]


class CommandRunner(Protocol):
    def run(self, cmd: list[str], *, capture: bool = False) -> Result[str, ProcessError]:
        """Run ``cmd``; with ``capture`` the output is returned instead of streamed.

        Live output yields an empty stdout string.
        """
        ...


class LiveRunner:
    def __init__(self, cwd: Path) -> None:
        self.cwd = cwd

    def run(self, cmd: list[str], *, capture: bool = False) -> Result[str, ProcessError]:
        if capture:
            return run(cmd, cwd=self.cwd)
        return run_live(cmd, cwd=self.cwd).map(lambda _: "")


class DryRunner:
    """Prints what would run and reports success without running anything."""

    def __init__(self, console: ConsoleProtocol) -> None:
        self.console = console

    def run(self, cmd: list[str], *, capture: bool = False) -> Result[str, ProcessError]:
        self.console.print(f"[dryrun] {shlex.join(cmd)}", Style.DRY_RUN)
        return Ok("")


def select_runner(*, dry: bool, cwd: Path, console: ConsoleProtocol) -> CommandRunner:
    if dry:
        return DryRunner(console)
    return LiveRunner(cwd)
