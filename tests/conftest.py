import io
import json

import pytest
from rich.console import Console

from data import Roster
from tests.helpers import ScriptedInput, output_of

__all__ = [
    "ScriptedInput",
    "output_of",
]

SAMPLE_CHARACTERS = [
    {
        "name": "Kaelen",
        "alias": ["The Valiant", "Kael"],
        "class": "Knight",
        "stats": {"health": 12000, "attack": 950, "crit_rate": 15.5},
        "advantages": ["Tanky"],
        "disadvantages": ["Low damage", "Weak to debuffs"],
        "skills": [
            {"name": "Barrier", "description": "Shields allies.", "tags": ["barrier", "support"]},
        ],
    },
    {
        "name": "Elara",
        "alias": ["The Mystic"],
        "class": "Mage",
        "advantages": ["Area damage"],
        "disadvantages": ["Fragile", "Weak to debuffs"],
        "skills": [
            {"name": "Prophecy", "description": "Hits everyone.", "tags": ["aoe", "debuff"]},
        ],
    },
    {
        "name": "Silas",
        "advantages": ["Burst"],
        "disadvantages": ["Fragile", "Slow cooldowns"],
        "skills": [
            {"name": "Smoke", "description": "Slows enemies.", "tags": ["aoe"]},
        ],
    },
]


@pytest.fixture
def roster() -> Roster:
    return Roster.model_validate(SAMPLE_CHARACTERS)


@pytest.fixture
def characters_file(tmp_path):
    path = tmp_path / "characters.json"
    path.write_text(json.dumps(SAMPLE_CHARACTERS), encoding="utf-8")
    return path


@pytest.fixture
def console() -> Console:
    return Console(file=io.StringIO(), width=120, force_terminal=False, color_system=None)


