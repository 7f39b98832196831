from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

BETA_TAG = "beta"


@dataclass(frozen=True, slots=True)
class ReleaseArgs:
    """Command-line input, fixed once parsed."""

    package_dir: Path
    version: str | None = None
    tag: str | None = None
    dry: bool = False
    skip_build: bool = False
    config_path: Path | None = None


@dataclass(frozen=True, slots=True)
class ReleaseIntent:
    """What the operator agreed to release."""

    version: str
    release_id: str  # <short-name>@<version>; commit message suffix and git tag
    tag: str | None
    dry: bool
    skip_build: bool

    @property
    def build_skipped(self) -> bool:
        return self.skip_build or self.dry


class Prompter(Protocol):
    """Interactive questions asked while resolving a release."""

    def select(self, message: str, choices: list[tuple[str, str]]) -> str | None:
        """Pick one of ``(value, title)`` choices; None when the operator cancels."""
        ...

    def text(self, message: str, default: str) -> str | None: ...

    def confirm(self, message: str) -> bool: ...
