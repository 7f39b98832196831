"""The release flow, phase by phase.

resolve version -> dist tag -> confirm -> write package.json -> build ->
changelog -> commit + tag (if the tree changed) -> publish -> push.

Each phase runs to completion before the next starts. The first ``Err``
stops the release; nothing already done is rolled back.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from pubkit.core.config import Config
from pubkit.core.result import Err, Ok, Result
from pubkit.output.console import ConsoleProtocol
from pubkit.release import semver
from pubkit.release.errors import (
    CancelledError,
    InvalidVersionError,
    ProcessInvocationError,
    ReleaseError,
)
from pubkit.release.manifest import PackageManifest, update_version
from pubkit.release.model import BETA_TAG, Prompter, ReleaseArgs, ReleaseIntent
from pubkit.release.publish import publish_package
from pubkit.release.runner import CommandRunner

CUSTOM_CHOICE = "custom"


@dataclass(frozen=True, slots=True)
class Collaborators:
    console: ConsoleProtocol
    prompter: Prompter
    live: CommandRunner  # always executes
    mutating: CommandRunner  # DryRunner when --dry


def resolve_target_version(
    *,
    requested: str | None,
    current: str,
    preid: str,
    prompter: Prompter,
) -> Result[str, InvalidVersionError | CancelledError]:
    """Phase 1: explicit version, else ask for an increment kind or a custom one."""
    target = requested
    if not target:
        choices = [
            (version, f"{kind} ({version})") for kind, version in semver.candidates(current, preid)
        ]
        choices.append((CUSTOM_CHOICE, CUSTOM_CHOICE))

        picked = prompter.select("Select release type", choices)
        if picked is None:
            return Err(CancelledError())
        if picked == CUSTOM_CHOICE:
            typed = prompter.text("Input custom version", current)
            if typed is None:
                return Err(CancelledError())
            target = typed
        else:
            target = picked

    normalized = semver.valid(target)
    if normalized is None:
        return Err(InvalidVersionError(target))
    return Ok(normalized)


def resolve_dist_tag(*, version: str, requested: str | None, prompter: Prompter) -> str | None:
    """Phase 2: an explicit --tag wins; beta versions may opt into the beta tag."""
    if requested:
        return requested
    if BETA_TAG in version and prompter.confirm(f'Publish under dist-tag "{BETA_TAG}"?'):
        return BETA_TAG
    return None


def plan_release(
    *,
    args: ReleaseArgs,
    manifest: PackageManifest,
    config: Config,
    prompter: Prompter,
) -> Result[ReleaseIntent | None, InvalidVersionError | CancelledError]:
    """Phases 1 to 3. ``Ok(None)`` means the operator declined."""
    version_r = resolve_target_version(
        requested=args.version,
        current=manifest.version,
        preid=config.release.preid,
        prompter=prompter,
    )
    if isinstance(version_r, Err):
        return version_r
    version = version_r.value

    tag = resolve_dist_tag(version=version, requested=args.tag, prompter=prompter)
    release_id = f"{manifest.short_name(config.release.strip_prefixes)}@{version}"

    if not prompter.confirm(f"Releasing {release_id}. Confirm?"):
        return Ok(None)

    return Ok(
        ReleaseIntent(
            version=version,
            release_id=release_id,
            tag=tag,
            dry=args.dry,
            skip_build=args.skip_build,
        )
    )


def _invoke(
    runner: CommandRunner, cmd: list[str], *, capture: bool = False
) -> Result[str, ProcessInvocationError]:
    return runner.run(cmd, capture=capture).map_err(ProcessInvocationError)


def execute_release(
    *,
    intent: ReleaseIntent,
    manifest_path: Path,
    config: Config,
    short_name: str,
    io: Collaborators,
) -> Result[None, ReleaseError]:
    """Phases 4 to 9 for an accepted intent."""
    console = io.console

    console.step("Updating package version...")
    updated = update_version(manifest_path, intent.version)
    if isinstance(updated, Err):
        return updated

    console.step("Building package...")
    if intent.build_skipped:
        console.print("(skipped)")
    else:
        built = _invoke(io.live, list(config.commands.build))
        if isinstance(built, Err):
            return built

    # Runs in dry-run as well; only the build honours --dry.
    console.step("Generating changelog...")
    changelog = _invoke(io.live, list(config.commands.changelog))
    if isinstance(changelog, Err):
        return changelog

    diff = _invoke(io.live, ["git", "diff"], capture=True)
    if isinstance(diff, Err):
        return diff

    if diff.value:
        console.step("Committing changes...")
        for cmd in (
            ["git", "add", "-A"],
            ["git", "commit", "-m", f"release: {intent.release_id}"],
            ["git", "tag", intent.release_id],
        ):
            done = _invoke(io.mutating, cmd)
            if isinstance(done, Err):
                return done
    else:
        console.print("No changes to commit.")

    console.step("Publishing package...")
    published = publish_package(
        runner=io.mutating,
        publish_cmd=config.commands.publish,
        package=short_name,
        version=intent.version,
        tag=intent.tag,
        console=console,
    )
    if isinstance(published, Err):
        return published

    console.step("Pushing to remote...")
    remote = config.release.remote
    for cmd in (
        ["git", "push", remote, f"refs/tags/{intent.release_id}"],
        ["git", "push"],
    ):
        pushed = _invoke(io.mutating, cmd)
        if isinstance(pushed, Err):
            return pushed

    if intent.dry:
        console.newline()
        console.print("Dry run finished - run git diff to see package changes.")

    console.newline()
    return Ok(None)


def run_release(
    *,
    args: ReleaseArgs,
    manifest: PackageManifest,
    config: Config,
    io: Collaborators,
) -> Result[ReleaseIntent | None, ReleaseError]:
    """Drive a whole release. ``Ok(None)`` when declined, ``Ok(intent)`` when done."""
    planned = plan_release(args=args, manifest=manifest, config=config, prompter=io.prompter)
    if isinstance(planned, Err):
        return planned
    intent = planned.value
    if intent is None:
        return Ok(None)

    executed = execute_release(
        intent=intent,
        manifest_path=manifest.path,
        config=config,
        short_name=manifest.short_name(config.release.strip_prefixes),
        io=io,
    )
    if isinstance(executed, Err):
        return executed
    return Ok(intent)
