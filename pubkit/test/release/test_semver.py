from __future__ import annotations

import pytest

from pubkit.release.semver import (
    INCREMENT_KINDS,
    SemVer,
    candidates,
    increment,
    parse,
    valid,
)


def test_parse_full_version() -> None:
    assert parse("1.2.3-beta.4+build.7") == SemVer(1, 2, 3, ("beta", 4), ("build", "7"))


def test_parse_rejects_malformed_versions() -> None:
    for raw in ("1.2", "1.2.3.4", "01.2.3", "1.2.3-", "1.2.3-beta..1", "latest", ""):
        assert parse(raw) is None, raw


def test_valid_normalizes_leading_v_and_whitespace() -> None:
    assert valid("  v1.0.0 ") == "1.0.0"
    assert valid("1.0.0-rc.1") == "1.0.0-rc.1"
    assert valid("=1.0.0") is None


def test_valid_rejects_non_ascii_digits() -> None:
    assert valid("1\u0660.0.0") is None
    assert parse("1.0.0-beta.\u0661") is None


@pytest.mark.parametrize(
    ("current", "kind", "expected"),
    [
        ("1.2.3", "patch", "1.2.4"),
        ("1.2.3", "minor", "1.3.0"),
        ("1.2.3", "major", "2.0.0"),
        ("1.2.3", "prepatch", "1.2.4-beta.0"),
        ("1.2.3", "preminor", "1.3.0-beta.0"),
        ("1.2.3", "premajor", "2.0.0-beta.0"),
        ("1.2.3", "prerelease", "1.2.4-beta.0"),
        ("1.2.4-beta.0", "prerelease", "1.2.4-beta.1"),
        ("1.2.4-beta.0", "patch", "1.2.4"),
        ("1.3.0-beta.2", "minor", "1.3.0"),
        ("2.0.0-beta.2", "major", "2.0.0"),
        ("1.2.4-alpha.3", "prerelease", "1.2.4-beta.0"),
        ("1.2.4-beta", "prerelease", "1.2.4-beta.0"),
        ("1.2.3+sha.abc", "patch", "1.2.4"),
    ],
)
def test_increment_follows_npm_rules(current: str, kind: str, expected: str) -> None:
    assert increment(current, kind, "beta") == expected  # type: ignore[arg-type]


@pytest.mark.parametrize("current", ["0.0.0", "1.2.3", "1.2.4-beta.0", "3.0.0-beta.5"])
def test_every_candidate_is_valid_and_newer(current: str) -> None:
    base = parse(current)
    assert base is not None

    offered = candidates(current, "beta")
    assert [kind for kind, _ in offered] == list(INCREMENT_KINDS)
    for kind, version in offered:
        parsed = parse(version)
        assert parsed is not None, kind
        assert parsed > base, f"{kind}: {version} <= {current}"


def test_candidates_empty_for_invalid_current() -> None:
    assert candidates("not-a-version", "beta") == []


def test_precedence_order_semver_org_example() -> None:
    ordered = [
        "1.0.0-alpha",
        "1.0.0-alpha.1",
        "1.0.0-alpha.beta",
        "1.0.0-beta",
        "1.0.0-beta.2",
        "1.0.0-beta.11",
        "1.0.0-rc.1",
        "1.0.0",
    ]
    parsed = [parse(v) for v in ordered]
    assert all(p is not None for p in parsed)
    for lower, higher in zip(parsed, parsed[1:]):
        assert lower < higher  # type: ignore[operator]


def test_build_metadata_ignored_for_precedence() -> None:
    a = parse("1.0.0+one")
    b = parse("1.0.0+two")
    assert a is not None and b is not None
    assert a.compare(b) == 0
    assert str(a) == "1.0.0+one"
