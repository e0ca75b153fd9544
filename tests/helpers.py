from __future__ import annotations

from typing import Optional

from rich.console import Console


class ScriptedInput:
    """Feeds prepared lines to the menu and returns None once exhausted, like a closed stdin."""

    def __init__(self, *lines: str) -> None:
        self.lines = list(lines)
        self.prompts: list[str] = []

    def __call__(self, prompt: str) -> Optional[str]:
        self.prompts.append(prompt)
        if not self.lines:
            return None
        return self.lines.pop(0)


def output_of(console: Console) -> str:
    return console.file.getvalue()
