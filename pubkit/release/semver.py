"""Semantic versions: parsing, validation, increments and precedence.

Follows SemVer 2.0.0 for syntax and precedence, and the npm ``semver``
package for increments so candidates match what the JavaScript tooling
around the package would compute.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Literal

ReleaseType = Literal[
    "patch",
    "minor",
    "major",
    "prepatch",
    "preminor",
    "premajor",
    "prerelease",
]

# Presentation order of the selection prompt.
INCREMENT_KINDS: tuple[ReleaseType, ...] = (
    "patch",
    "minor",
    "major",
    "prepatch",
    "preminor",
    "premajor",
    "prerelease",
)

_NUM = r"0|[1-9]\d*"
_PRE_ID = r"0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*"
_SEMVER_RE = re.compile(
    rf"^v?({_NUM})\.({_NUM})\.({_NUM})"
    rf"(?:-((?:{_PRE_ID})(?:\.(?:{_PRE_ID}))*))?"
    r"(?:\+([0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?$",
    re.ASCII,
)

PreId = int | str


def _pre_id(raw: str) -> PreId:
    return int(raw) if raw.isdigit() else raw


def _compare_ids(a: PreId, b: PreId) -> int:
    # Numeric identifiers sort before alphanumeric ones.
    if isinstance(a, int) and isinstance(b, int):
        return (a > b) - (a < b)
    if isinstance(a, int):
        return -1
    if isinstance(b, int):
        return 1
    return (a > b) - (a < b)


@dataclass(frozen=True, slots=True)
class SemVer:
    major: int
    minor: int
    patch: int
    prerelease: tuple[PreId, ...] = ()
    build: tuple[str, ...] = ()

    def __str__(self) -> str:
        out = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            out += "-" + ".".join(str(p) for p in self.prerelease)
        if self.build:
            out += "+" + ".".join(self.build)
        return out

    def compare(self, other: SemVer) -> int:
        """Precedence comparison; build metadata is ignored."""
        main_a = (self.major, self.minor, self.patch)
        main_b = (other.major, other.minor, other.patch)
        if main_a != main_b:
            return -1 if main_a < main_b else 1

        if not self.prerelease and not other.prerelease:
            return 0
        if not self.prerelease:
            return 1
        if not other.prerelease:
            return -1

        for a, b in zip(self.prerelease, other.prerelease):
            c = _compare_ids(a, b)
            if c:
                return c
        n, m = len(self.prerelease), len(other.prerelease)
        return (n > m) - (n < m)

    def __lt__(self, other: SemVer) -> bool:
        return self.compare(other) < 0

    def __le__(self, other: SemVer) -> bool:
        return self.compare(other) <= 0

    def __gt__(self, other: SemVer) -> bool:
        return self.compare(other) > 0

    def __ge__(self, other: SemVer) -> bool:
        return self.compare(other) >= 0

    def bump(self, kind: ReleaseType, preid: str) -> SemVer:
        """Return the next version for ``kind``.

        Build metadata never survives an increment. ``preid`` names the
        prerelease identifier for the ``pre*`` kinds, e.g. ``beta`` turns
        1.2.3 into 1.2.4-beta.0 for prepatch.
        """
        match kind:
            case "major":
                if self.minor != 0 or self.patch != 0 or not self.prerelease:
                    return SemVer(self.major + 1, 0, 0)
                return SemVer(self.major, 0, 0)
            case "minor":
                if self.patch != 0 or not self.prerelease:
                    return SemVer(self.major, self.minor + 1, 0)
                return SemVer(self.major, self.minor, 0)
            case "patch":
                if not self.prerelease:
                    return SemVer(self.major, self.minor, self.patch + 1)
                return SemVer(self.major, self.minor, self.patch)
            case "premajor":
                return SemVer(self.major + 1, 0, 0)._next_pre(preid)
            case "preminor":
                return SemVer(self.major, self.minor + 1, 0)._next_pre(preid)
            case "prepatch":
                return SemVer(self.major, self.minor, self.patch + 1)._next_pre(preid)
            case "prerelease":
                base = self if self.prerelease else SemVer(self.major, self.minor, self.patch + 1)
                return SemVer(base.major, base.minor, base.patch, base.prerelease)._next_pre(preid)
            case _:
                raise AssertionError(f"unexpected increment kind: {kind}")

    def _next_pre(self, preid: str) -> SemVer:
        pre = list(self.prerelease)
        if not pre:
            pre = [0]
        else:
            for i in range(len(pre) - 1, -1, -1):
                item = pre[i]
                if isinstance(item, int):
                    pre[i] = item + 1
                    break
            else:
                pre.append(0)

        # A different identifier, or one without a counter, restarts at <preid>.0.
        if preid:
            counted = len(pre) > 1 and isinstance(pre[1], int)
            if pre[0] != preid or not counted:
                pre = [preid, 0]
        return SemVer(self.major, self.minor, self.patch, tuple(pre))


def parse(version: str) -> SemVer | None:
    """Parse a version string; surrounding whitespace and a leading ``v`` are accepted."""
    m = _SEMVER_RE.match(version.strip())
    if m is None:
        return None
    pre = tuple(_pre_id(p) for p in m.group(4).split(".")) if m.group(4) else ()
    build = tuple(m.group(5).split(".")) if m.group(5) else ()
    return SemVer(int(m.group(1)), int(m.group(2)), int(m.group(3)), pre, build)


def valid(version: str) -> str | None:
    """Return the normalised version string, or None when invalid."""
    parsed = parse(version)
    if parsed is None:
        return None
    return str(parsed)


def increment(version: str, kind: ReleaseType, preid: str) -> str | None:
    parsed = parse(version)
    if parsed is None:
        return None
    return str(parsed.bump(kind, preid))


def candidates(current: str, preid: str) -> list[tuple[ReleaseType, str]]:
    """Every increment kind with its concrete next version.

    Returns an empty list when ``current`` is not a valid version.
    """
    parsed = parse(current)
    if parsed is None:
        return []
    return [(kind, str(parsed.bump(kind, preid))) for kind in INCREMENT_KINDS]
