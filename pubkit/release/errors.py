"""Error values for the release flow.

All of them travel inside ``Err``; ``AlreadyPublishedError`` is the only
one the orchestrator tolerates.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from pubkit.platform.process import ProcessError


@dataclass(frozen=True, slots=True)
class InvalidVersionError:
    version: str

    @property
    def message(self) -> str:
        return f"invalid target version: {self.version}"


@dataclass(frozen=True, slots=True)
class AlreadyPublishedError:
    """The registry already holds ``package@version``."""

    package: str
    version: str
    stderr: str

    @property
    def message(self) -> str:
        return f"{self.package}@{self.version} was previously published"


@dataclass(frozen=True, slots=True)
class ProcessInvocationError:
    process: ProcessError

    @property
    def message(self) -> str:
        return str(self.process)

    @property
    def hint(self) -> str | None:
        detail = self.process.stderr.strip()
        return detail or None


@dataclass(frozen=True, slots=True)
class ManifestError:
    path: Path
    message: str


@dataclass(frozen=True, slots=True)
class CancelledError:
    """The operator backed out of a prompt."""

    message: str = "release cancelled"


type ReleaseError = (
    InvalidVersionError | ProcessInvocationError | ManifestError | CancelledError
)
