from typing import Iterable

from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from data import Character, Stats

NOT_FOUND_TEXT = "Character not found."

STAT_LABELS = {
    "health": "Health",
    "attack": "Attack",
    "defense": "Defense",
    "speed": "Speed",
    "crit_rate": "Crit Rate",
    "crit_damage": "Crit Damage",
    "effect_hit_rate": "Effect Hit Rate",
    "effect_resistance": "Effect Resistance",
    "dual_attack_rate": "Dual Attack Rate",
}


def format_number(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else f"{value:g}"


def stats_table(stats: Stats) -> Table:
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column(style="bold blue")
    table.add_column(style="cyan", justify="right")
    for field_name, label in STAT_LABELS.items():
        table.add_row(label, format_number(getattr(stats, field_name)))
    return table


def character_panel(character: Character) -> Panel:
    """Builds the details panel shown for a single character."""
    parts = []
    if character.class_name:
        parts.append(Text.assemble(("Class: ", "bold blue"), (character.class_name, "cyan")))
    if character.alias:
        parts.append(
            Text.assemble(("Alias: ", "bold blue"), (", ".join(character.alias), "cyan"))
        )
    if character.stats is not None:
        parts.append(Text("Stats:", style="bold blue"))
        parts.append(stats_table(character.stats))

    parts.append(Text("Advantages:", style="bold magenta"))
    parts.extend(Text(f"- {advantage}", style="magenta") for advantage in character.advantages)
    parts.append(Text("Disadvantages:", style="bold red"))
    parts.extend(Text(f"- {disadvantage}", style="red") for disadvantage in character.disadvantages)

    if character.skills:
        parts.append(Text("Skills:", style="bold green"))
        for skill in character.skills:
            line = Text.assemble(("- ", ""), (skill.name, "bold green"))
            if skill.tags:
                line.append(f" [{', '.join(skill.tags)}]", style="italic")
            parts.append(line)
            if skill.description:
                parts.append(Text(f"  {skill.description}"))

    return Panel(
        Group(*parts),
        title=Text(character.name, style="bold cyan"),
        title_align="left",
        border_style="cyan",
        expand=False,
    )


def roster_line(character: Character) -> str:
    if character.alias:
        return f"{character.name} ({', '.join(character.alias)})"
    return character.name


def print_character(console: Console, character: Character | None) -> None:
    if character is None:
        console.print(NOT_FOUND_TEXT)
        return
    console.print()
    console.print(character_panel(character))
    console.print()


def print_lines(console: Console, lines: Iterable[str], style: str = "") -> None:
    for line in lines:
        # Text keeps names like "[bold]" from being read as markup
        console.print(Text(line, style=style))


def print_disadvantages(console: Console, disadvantages: list[str]) -> None:
    console.print("Disadvantages for selected characters:", style="cyan")
    print_lines(console, disadvantages, style="red")
