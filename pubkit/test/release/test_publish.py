from __future__ import annotations

from pubkit.core.result import Err, Ok
from pubkit.output.console import MockConsole, Style
from pubkit.release.errors import AlreadyPublishedError, ProcessInvocationError
from pubkit.release.publish import publish_args, publish_package

from ._fakes import RecordingRunner, fail

YARN = ("yarn", "publish")


def test_publish_args_without_tag() -> None:
    assert publish_args(YARN, "1.2.4", None) == [
        "yarn",
        "publish",
        "--no-git-tag-version",
        "--new-version",
        "1.2.4",
        "--access",
        "public",
    ]


def test_publish_args_with_tag() -> None:
    assert publish_args(YARN, "2.0.0-beta.0", "beta")[-2:] == ["--tag", "beta"]


def test_publish_success_captures_output_and_reports() -> None:
    runner = RecordingRunner()
    console = MockConsole()

    result = publish_package(
        runner=runner, publish_cmd=YARN, package="table", version="1.2.4", tag=None, console=console
    )

    assert result == Ok(None)
    assert runner.captured == [True]
    assert console.styled(Style.SUCCESS) == ["Successfully published table@1.2.4"]


def test_previously_published_is_tolerated() -> None:
    cmd = publish_args(YARN, "2.0.0", None)
    runner = RecordingRunner(
        outputs={("yarn", "publish"): fail(cmd, stderr="error: version 2.0.0 previously published")}
    )
    console = MockConsole()

    result = publish_package(
        runner=runner, publish_cmd=YARN, package="table", version="2.0.0", tag=None, console=console
    )

    assert isinstance(result, Ok)
    assert isinstance(result.value, AlreadyPublishedError)
    assert result.value.version == "2.0.0"
    assert console.styled(Style.SKIPPED) == ["Skipping already published: table"]
    assert not console.styled(Style.SUCCESS)


def test_other_publish_failures_propagate() -> None:
    cmd = publish_args(YARN, "2.0.0", None)
    runner = RecordingRunner(
        outputs={("yarn", "publish"): fail(cmd, returncode=1, stderr="401 Unauthorized")}
    )

    result = publish_package(
        runner=runner,
        publish_cmd=YARN,
        package="table",
        version="2.0.0",
        tag=None,
        console=MockConsole(),
    )

    assert isinstance(result, Err)
    assert isinstance(result.error, ProcessInvocationError)
    assert result.error.hint == "401 Unauthorized"
