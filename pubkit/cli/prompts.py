from __future__ import annotations

import typer

from pubkit.cli.selector import SelectorOption, is_interactive_terminal, select_one
from pubkit.output.console import ConsoleProtocol, Style


class TerminalPrompter:
    """Prompter backed by the arrow-key selector and typer prompts.

    Without a TTY (piped stdin, CI shells) the selection falls back to a
    numbered list read with ``typer.prompt``.
    """

    def __init__(self, console: ConsoleProtocol) -> None:
        self.console = console

    def select(self, message: str, choices: list[tuple[str, str]]) -> str | None:
        if is_interactive_terminal():
            picked = select_one(
                title=message,
                options=[SelectorOption(value=value, label=title) for value, title in choices],
            )
            if picked.action == "cancel":
                return None
            return picked.value

        self.console.print(message)
        for i, (_, title) in enumerate(choices, start=1):
            self.console.print(f"{i:2}. {title}", Style.DIM)

        while True:
            raw = typer.prompt("Pick a number", default="1")
            try:
                idx = int(raw)
            except ValueError:
                self.console.error("invalid number")
                continue
            if idx < 1 or idx > len(choices):
                self.console.error("out of range")
                continue
            return choices[idx - 1][0]

    def text(self, message: str, default: str) -> str | None:
        # Validation happens in the orchestrator; blank input fails there.
        return str(typer.prompt(message, default=default))

    def confirm(self, message: str) -> bool:
        return typer.confirm(message, default=False)
