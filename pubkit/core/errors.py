"""Process exit codes for the pubkit CLI.

Declining the final confirmation is not an error and exits with ``OK``.
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes, stable across releases.

    - 0: Success (including an operator declining the release)
    - 1: User error (invalid version, cancelled prompt, unusable manifest)
    - 2: Environment error (invalid release.toml)
    - 3: Process error (build, changelog, git or publish command failed)
    """

    OK = 0
    USER_ERROR = 1
    ENV_ERROR = 2
    PROCESS_ERROR = 3
