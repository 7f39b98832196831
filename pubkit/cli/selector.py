from __future__ import annotations

import os
import shutil
import sys
from dataclasses import dataclass
from typing import Literal, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class SelectorOption[T]:
    value: T
    label: str


@dataclass(frozen=True, slots=True)
class SelectorResult[T]:
    action: Literal["select", "cancel"]
    value: T | None


def is_interactive_terminal() -> bool:
    return bool(sys.stdin.isatty() and sys.stdout.isatty())


def _color_enabled() -> bool:
    if not is_interactive_terminal():
        return False
    if os.getenv("NO_COLOR") is not None:
        return False
    return os.getenv("TERM", "").lower() != "dumb"


def _paint(text: str, *codes: str) -> str:
    if not _color_enabled() or not codes:
        return text
    return f"\x1b[{';'.join(codes)}m{text}\x1b[0m"


def _read_key() -> str:
    if os.name == "nt":
        import msvcrt

        ch = msvcrt.getwch()
        if ch in ("\r", "\n"):
            return "enter"
        if ch in ("q", "Q", "\x1b", "\x03"):
            return "cancel"
        if ch in ("\x00", "\xe0"):
            ch2 = msvcrt.getwch()
            if ch2 == "H":
                return "up"
            if ch2 == "P":
                return "down"
        return "other"

    import termios
    import tty

    fd = sys.stdin.fileno()
    old = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        ch = sys.stdin.read(1)
        if ch in ("\r", "\n"):
            return "enter"
        if ch in ("q", "Q", "\x03"):
            return "cancel"
        if ch in ("k", "K"):
            return "up"
        if ch in ("j", "J"):
            return "down"
        if ch == "\x1b":
            if sys.stdin.read(1) == "[":
                c3 = sys.stdin.read(1)
                if c3 == "A":
                    return "up"
                if c3 == "B":
                    return "down"
            return "cancel"
        return "other"
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)


def _truncate(text: str, width: int) -> str:
    if len(text) <= width:
        return text
    if width <= 3:
        return text[:width]
    return text[: width - 3] + "..."


def _cols() -> int:
    return max(40, min(120, shutil.get_terminal_size((80, 24)).columns))


def _render(*, title: str, labels: list[str], index: int, first: bool) -> None:
    # Redraw in place: move the cursor back over the previous frame.
    if not first:
        sys.stdout.write(f"\x1b[{len(labels) + 2}A")

    sys.stdout.write("\x1b[2K" + _paint("? ", "1", "32") + _paint(title, "1", "97") + "\n")
    width = _cols() - 4
    for i, label in enumerate(labels):
        text = _truncate(label, width)
        if i == index:
            line = _paint(f"> {text}", "1", "36")
        else:
            line = f"  {text}"
        sys.stdout.write("\x1b[2K" + line + "\n")
    sys.stdout.write("\x1b[2K" + _paint("Up/Down + Enter, q: cancel", "2", "37") + "\n")
    sys.stdout.flush()


def select_one[T](
    *,
    title: str,
    options: list[SelectorOption[T]],
) -> SelectorResult[T]:
    """Arrow-key selection on a TTY.

    Raises:
        ValueError: if ``options`` is empty.
        RuntimeError: if stdin/stdout is not a terminal.
    """
    if not options:
        raise ValueError("selector requires at least one option")
    if not is_interactive_terminal():
        raise RuntimeError("interactive selector requires a TTY")

    idx = 0
    labels = [o.label for o in options]
    first = True

    while True:
        _render(title=title, labels=labels, index=idx, first=first)
        first = False
        key = _read_key()

        if key == "up":
            idx = (idx - 1) % len(options)
            continue
        if key == "down":
            idx = (idx + 1) % len(options)
            continue
        if key == "enter":
            return SelectorResult(action="select", value=options[idx].value)
        if key == "cancel":
            return SelectorResult(action="cancel", value=None)
