from __future__ import annotations

from pathlib import Path

import typer

from pubkit import __version__
from pubkit.cli.context import build_context, exit_with
from pubkit.core.errors import ErrorCode
from pubkit.core.result import Err
from pubkit.release.errors import ProcessInvocationError, ReleaseError
from pubkit.release.model import ReleaseArgs
from pubkit.release.orchestrator import run_release

app = typer.Typer(
    add_completion=False,
    no_args_is_help=False,
    rich_markup_mode="rich",
)


def _fail(error: ReleaseError) -> None:
    if isinstance(error, ProcessInvocationError):
        exit_with(error.message, code=ErrorCode.PROCESS_ERROR, hint=error.hint)
    exit_with(error.message, code=ErrorCode.USER_ERROR)


@app.command()
def release(
    target: str | None = typer.Argument(
        None, metavar="VERSION", help="Target version; prompts for one when omitted."
    ),
    dry: bool = typer.Option(
        False, "--dry", help="Print commit/tag/publish/push commands instead of running them."
    ),
    skip_build: bool = typer.Option(False, "--skipBuild", "--skip-build", help="Skip the build."),
    tag: str | None = typer.Option(None, "--tag", help="Registry dist-tag to publish under."),
    cwd: Path | None = typer.Option(
        None, "--cwd", help="Package directory (default: current directory)."
    ),
    config: Path | None = typer.Option(
        None, "--config", help="Config file (default: <package>/release.toml if present)."
    ),
    show_version: bool = typer.Option(False, "--version", help="Show version and exit."),
) -> None:
    """Bump, build, changelog, commit, tag, publish and push one package."""
    if show_version:
        typer.echo(__version__)
        raise typer.Exit(code=0)

    args = ReleaseArgs(
        package_dir=(cwd or Path.cwd()).expanduser().resolve(),
        version=target,
        tag=tag,
        dry=dry,
        skip_build=skip_build,
        config_path=config,
    )
    ctx = build_context(args)

    result = run_release(args=args, manifest=ctx.manifest, config=ctx.config, io=ctx.io)
    if isinstance(result, Err):
        _fail(result.error)


def main() -> None:
    app()
