from __future__ import annotations

from dataclasses import dataclass
from typing import NoReturn

import typer

from pubkit.cli.prompts import TerminalPrompter
from pubkit.core.config import Config, resolve_config
from pubkit.core.errors import ErrorCode
from pubkit.core.result import Err
from pubkit.output.console import RichConsole
from pubkit.release.manifest import PackageManifest, read_manifest
from pubkit.release.model import ReleaseArgs
from pubkit.release.orchestrator import Collaborators
from pubkit.release.runner import LiveRunner, select_runner


@dataclass(frozen=True, slots=True)
class CLIContext:
    config: Config
    manifest: PackageManifest
    io: Collaborators


def exit_with(message: str, *, code: ErrorCode, hint: str | None = None) -> NoReturn:
    typer.echo(f"error: {message}", err=True)
    if hint:
        typer.echo(hint, err=True)
    raise typer.Exit(code=int(code))


def build_context(args: ReleaseArgs) -> CLIContext:
    """Load config and manifest and pick runners; exits on failure."""
    if not args.package_dir.is_dir():
        exit_with(f"not a directory: {args.package_dir}", code=ErrorCode.USER_ERROR)

    config_r = resolve_config(args.package_dir, args.config_path)
    if isinstance(config_r, Err):
        exit_with(config_r.error.message, code=ErrorCode.ENV_ERROR)

    manifest_r = read_manifest(args.package_dir)
    if isinstance(manifest_r, Err):
        exit_with(manifest_r.error.message, code=ErrorCode.USER_ERROR)

    console = RichConsole()
    return CLIContext(
        config=config_r.value,
        manifest=manifest_r.value,
        io=Collaborators(
            console=console,
            prompter=TerminalPrompter(console),
            live=LiveRunner(args.package_dir),
            mutating=select_runner(dry=args.dry, cwd=args.package_dir, console=console),
        ),
    )
