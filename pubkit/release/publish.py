from __future__ import annotations

import re

from pubkit.core.result import Err, Ok, Result
from pubkit.output.console import ConsoleProtocol, Style
from pubkit.release.errors import AlreadyPublishedError, ProcessInvocationError
from pubkit.release.runner import CommandRunner

_ALREADY_PUBLISHED = re.compile(r"previously published")


def publish_args(publish_cmd: tuple[str, ...], version: str, tag: str | None) -> list[str]:
    # The publisher must not create its own git tag: the release tag already exists.
    args = [
        *publish_cmd,
        "--no-git-tag-version",
        "--new-version",
        version,
        "--access",
        "public",
    ]
    if tag:
        args.extend(["--tag", tag])
    return args


def publish_package(
    *,
    runner: CommandRunner,
    publish_cmd: tuple[str, ...],
    package: str,
    version: str,
    tag: str | None,
    console: ConsoleProtocol,
) -> Result[AlreadyPublishedError | None, ProcessInvocationError]:
    """Publish ``version`` to the registry.

    A rejection because the version already exists is reported and returned
    as ``Ok(AlreadyPublishedError)``; the release carries on.
    """
    result = runner.run(publish_args(publish_cmd, version, tag), capture=True)
    if isinstance(result, Ok):
        console.success(f"Successfully published {package}@{version}")
        return Ok(None)

    e = result.error
    if _ALREADY_PUBLISHED.search(e.stderr):
        console.print(f"Skipping already published: {package}", Style.SKIPPED)
        return Ok(AlreadyPublishedError(package=package, version=version, stderr=e.stderr))
    return Err(ProcessInvocationError(e))
