from components.menu import INVALID_OPTION_TEXT, CharacterMenu
from tests.helpers import ScriptedInput, output_of


def _run(roster, console, *lines):
    reader = ScriptedInput(*lines)
    CharacterMenu(roster, console, reader).run()
    return output_of(console), reader


def test_menu_lists_options(roster, console):
    text, _ = _run(roster, console, "5")
    for option in (
        "1. Display character details",
        "2. Search characters by skill tag",
        "3. Meta search for disadvantages",
        "4. List all characters",
        "5. Exit",
    ):
        assert option in text


def test_menu_invalid_choice_reprompts(roster, console):
    text, reader = _run(roster, console, "abc", "9", "", "5")
    assert text.count(INVALID_OPTION_TEXT) == 3
    assert text.count("Select an option:") == 4
    assert reader.lines == []


def test_menu_display_character_by_alias(roster, console):
    text, _ = _run(roster, console, "1", "  The Mystic ", "5")
    assert "Elara" in text
    assert "Class: Mage" in text


def test_menu_unknown_character_returns_to_menu(roster, console):
    text, _ = _run(roster, console, "1", "Ghost", "4", "5")
    assert "Character not found." in text
    assert "Kaelen (The Valiant, Kael)" in text


def test_menu_skill_tag_search(roster, console):
    text, _ = _run(roster, console, "2", "aoe", "5")
    lines = text.splitlines()
    heading = lines.index("Characters with skill tag 'aoe':")
    assert lines[heading + 1:heading + 3] == ["Elara", "Silas"]


def test_menu_meta_search_splits_names(roster, console):
    text, _ = _run(roster, console, "3", "Elara, Silas ,Ghost", "5")
    lines = text.splitlines()
    heading = lines.index("Disadvantages for selected characters:")
    assert lines[heading + 1:heading + 4] == ["Fragile", "Weak to debuffs", "Slow cooldowns"]


def test_menu_ends_when_input_closes(roster, console):
    text, reader = _run(roster, console)
    assert reader.prompts == ["> "]
    assert "Select an option:" in text


def test_menu_ends_when_input_closes_mid_question(roster, console):
    _, reader = _run(roster, console, "3")
    assert reader.prompts == ["> ", "Enter character names (comma separated): "]
