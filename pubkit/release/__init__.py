"""Release flow for one package: version, build, changelog, git, publish."""

from pubkit.release.orchestrator import Collaborators, run_release

__all__ = ["Collaborators", "run_release"]
