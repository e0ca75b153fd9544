import argparse
import logging
import sys
from typing import Optional, Sequence

from rich.console import Console

from components.elements import print_character, print_disadvantages, print_lines, roster_line
from components.menu import CharacterMenu, LineReader
from config import Settings, get_settings
from data import Roster
from logger import configure_logging, get_logger
from queries import filter_by_skill_tag, find_character, find_disadvantages
from store import LoadError, load_characters

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_LOAD_ERROR = 1


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="character-info",
        description="Look up characters, search by skill tag and rank shared disadvantages.",
    )
    parser.add_argument(
        "-f", "--file", default=settings.file,
        help=f"JSON file containing character data (default: {settings.file})",
    )
    parser.add_argument(
        "-c", "--character", metavar="NAME",
        help="Display character details by name or alias",
    )
    parser.add_argument(
        "-t", "--skill-tag", metavar="TAG",
        help="List characters owning a skill with this tag",
    )
    parser.add_argument(
        "-m", "--meta", nargs="+", metavar="NAME",
        help="Perform meta search for disadvantages of selected characters",
    )
    parser.add_argument(
        "-l", "--list", action="store_true",
        help="List every character name and alias",
    )
    parser.add_argument(
        "-i", "--interactive", action="store_true",
        help="Start the interactive menu even when other options are given",
    )
    parser.add_argument(
        "-v", "--verbose", action="count", default=0,
        help="Increase log output (-v for info, -vv for debug)",
    )
    return parser


class CharacterInfo:
    def __init__(self, roster: Roster, console: Console, read_line: LineReader | None = None):
        self.roster = roster
        self.console = console
        self.read_line = read_line

    def run(self, args: argparse.Namespace) -> None:
        has_query = bool(
            args.list or args.character is not None or args.skill_tag is not None or args.meta
        )

        if args.list:
            print_lines(self.console, [roster_line(character) for character in self.roster])

        if args.character is not None:
            print_character(self.console, find_character(self.roster, args.character))

        if args.skill_tag is not None:
            matches = filter_by_skill_tag(self.roster, args.skill_tag)
            print_lines(self.console, [character.name for character in matches])

        if args.meta:
            print_disadvantages(self.console, find_disadvantages(self.roster, args.meta))

        if args.interactive or not has_query:
            CharacterMenu(self.roster, self.console, self.read_line).run()


def resolve_log_level(settings: Settings, verbosity: int) -> int | str:
    if verbosity >= 2:
        return logging.DEBUG
    if verbosity == 1:
        return logging.INFO
    return settings.log_level


def main(
    argv: Optional[Sequence[str]] = None,
    console: Console | None = None,
    read_line: LineReader | None = None,
) -> int:
    """Entry point for the character-info console script."""
    settings = get_settings()
    args = build_parser(settings).parse_args(argv)
    configure_logging(resolve_log_level(settings, args.verbose))
    console = console or Console(width=settings.width)

    try:
        roster = load_characters(args.file)
    except LoadError as e:
        Console(stderr=True).print(f"Error: {e}", style="bold red", markup=False, soft_wrap=True)
        return EXIT_LOAD_ERROR

    CharacterInfo(roster, console, read_line).run(args)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
