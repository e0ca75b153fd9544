from pathlib import Path

from pydantic import ValidationError

from data import Roster
from logger import get_logger

logger = get_logger(__name__)


class LoadError(Exception):
    """Raised when a character file is missing, unreadable or malformed."""

    def __init__(self, path: str | Path, reason: str):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Could not load characters from {self.path}: {reason}")


def load_characters(file_path: str | Path) -> Roster:
    """
    Reads a JSON array of characters from disk. Order is kept as written and
    duplicate names are not collapsed.
    """
    path = Path(file_path)
    try:
        raw = path.read_bytes()
    except FileNotFoundError as e:
        logger.debug("Character file not found: %s", path)
        raise LoadError(path, "file not found") from e
    except OSError as e:
        logger.debug("Character file unreadable: %s (%s)", path, e)
        raise LoadError(path, f"unreadable ({e.strerror or e})") from e

    try:
        roster = Roster.model_validate_json(raw)
    except ValidationError as e:
        logger.debug("Character file malformed: %s (%d errors)", path, e.error_count())
        first = e.errors()[0]
        location = ".".join(str(part) for part in first["loc"]) or "<root>"
        raise LoadError(path, f"malformed at {location}: {first['msg']}") from e

    logger.info("Loaded %d characters from %s", len(roster), path)
    return roster


def save_characters(file_path: str | Path, roster: Roster) -> None:
    """Writes the roster back out in the same schema load_characters reads."""
    path = Path(file_path)
    path.write_text(
        roster.model_dump_json(by_alias=True, exclude_none=True, indent=2),
        encoding="utf-8",
    )
    logger.info("Saved %d characters to %s", len(roster), path)
