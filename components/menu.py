import sys
from typing import Callable, Optional

import questionary
from rich.console import Console

from data import Roster
from logger import get_logger
from queries import filter_by_skill_tag, find_character, find_disadvantages, parse_selection
from .elements import print_character, print_disadvantages, print_lines, roster_line

logger = get_logger(__name__)

LineReader = Callable[[str], Optional[str]]

INVALID_OPTION_TEXT = "Invalid option, try again."


def questionary_reader(prompt: str) -> Optional[str]:
    """Reads a line with questionary; None once the user hits Ctrl-C or Ctrl-D."""
    try:
        return questionary.text(prompt, qmark="").unsafe_ask()
    except (EOFError, KeyboardInterrupt):
        return None


def console_reader(console: Console) -> LineReader:
    """Plain line reader for piped stdin, where questionary has no terminal."""

    def read(prompt: str) -> Optional[str]:
        try:
            return console.input(prompt)
        except (EOFError, KeyboardInterrupt):
            return None

    return read


def default_reader(console: Console) -> LineReader:
    if sys.stdin.isatty():
        return questionary_reader
    return console_reader(console)


class CharacterMenu:
    OPTIONS = [
        ("Display character details", "cyan"),
        ("Search characters by skill tag", "cyan"),
        ("Meta search for disadvantages", "cyan"),
        ("List all characters", "cyan"),
        ("Exit", "red"),
    ]

    def __init__(self, roster: Roster, console: Console, read_line: LineReader | None = None):
        self.roster = roster
        self.console = console
        self.read_line = read_line or default_reader(console)
        self.handlers = {
            1: self._display_character,
            2: self._search_skill_tag,
            3: self._meta_search,
            4: self._list_characters,
        }

    def run(self) -> None:
        """Shows the menu until the user exits or input runs out."""
        while True:
            self._print_menu()
            choice = self.read_line("> ")
            if choice is None:
                logger.info("Input closed, leaving interactive mode")
                break

            option = self._parse_choice(choice)
            if option == len(self.OPTIONS):
                break

            handler = self.handlers.get(option)
            if handler is None:
                self.console.print(INVALID_OPTION_TEXT)
                continue
            if not handler():
                logger.info("Input closed, leaving interactive mode")
                break

    def _print_menu(self) -> None:
        self.console.print("Select an option:", style="green")
        for number, (label, style) in enumerate(self.OPTIONS, start=1):
            self.console.print(f"{number}. {label}", style=style)

    def _parse_choice(self, choice: str) -> Optional[int]:
        try:
            return int(choice.strip())
        except ValueError:
            logger.debug("Non-numeric menu choice %r", choice)
            return None

    def _display_character(self) -> bool:
        identifier = self.read_line("Enter character name or alias: ")
        if identifier is None:
            return False
        print_character(self.console, find_character(self.roster, identifier.strip()))
        return True

    def _search_skill_tag(self) -> bool:
        tag = self.read_line("Enter skill tag: ")
        if tag is None:
            return False
        matches = filter_by_skill_tag(self.roster, tag.strip())
        self.console.print()
        self.console.print(f"Characters with skill tag '{tag.strip()}':", style="cyan", markup=False)
        print_lines(self.console, [character.name for character in matches])
        self.console.print()
        return True

    def _meta_search(self) -> bool:
        names = self.read_line("Enter character names (comma separated): ")
        if names is None:
            return False
        disadvantages = find_disadvantages(self.roster, parse_selection(names))
        self.console.print()
        print_disadvantages(self.console, disadvantages)
        self.console.print()
        return True

    def _list_characters(self) -> bool:
        self.console.print()
        print_lines(self.console, [roster_line(character) for character in self.roster])
        self.console.print()
        return True
