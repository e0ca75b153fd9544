from collections import Counter
from typing import Iterable, Optional

from data import Character, Roster
from logger import get_logger

logger = get_logger(__name__)


def find_character(roster: Roster, identifier: str) -> Optional[Character]:
    """
    Returns the first character, in roster order, whose name or one of whose
    aliases equals the identifier exactly. None when nothing matches.
    """
    return next(
        (character for character in roster if character.identified_by(identifier)),
        None,
    )


def filter_by_skill_tag(roster: Roster, tag: str) -> list[Character]:
    matches = [character for character in roster if tag in character.skill_tags()]
    logger.debug("Skill tag %r matched %d characters", tag, len(matches))
    return matches


def count_disadvantages(
    roster: Roster, selection: Iterable[str]
) -> list[tuple[str, int]]:
    """
    Counts how often each disadvantage occurs across the selected characters.

    A character is selected when its name or any alias is in the selection and
    is counted once however many of its identifiers were given. Results are
    ordered by descending count; equal counts keep the order in which the
    disadvantage was first seen while scanning the roster.
    """
    selected = set(selection)
    if not selected:
        return []

    counts: Counter[str] = Counter()
    for character in roster:
        if character.name in selected or selected.intersection(character.alias):
            counts.update(character.disadvantages)

    # most_common keeps insertion order among equal counts
    ranked = counts.most_common()
    logger.debug(
        "Aggregated %d distinct disadvantages for %d identifiers",
        len(ranked),
        len(selected),
    )
    return ranked


def find_disadvantages(roster: Roster, selection: Iterable[str]) -> list[str]:
    return [name for name, _ in count_disadvantages(roster, selection)]


def parse_selection(text: str) -> list[str]:
    """Splits comma separated input into trimmed, non-empty identifiers."""
    return [part.strip() for part in text.split(",") if part.strip()]
