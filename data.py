from typing import Iterator

from pydantic import BaseModel, ConfigDict, Field, RootModel, ValidationInfo, field_validator


class Skill(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = ""
    description: str = ""
    tags: tuple[str, ...] = ()

    @field_validator("name", "description", "tags", mode="before")
    @classmethod
    def null_as_default(cls, value, info: ValidationInfo):
        return cls.model_fields[info.field_name].default if value is None else value


class Stats(BaseModel):
    model_config = ConfigDict(frozen=True)

    health: float = 0
    attack: float = 0
    defense: float = 0
    speed: float = 0
    crit_rate: float = 0
    crit_damage: float = 0
    effect_hit_rate: float = 0
    effect_resistance: float = 0
    dual_attack_rate: float = 0


class Character(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    alias: tuple[str, ...] = ()
    class_name: str = Field(default="", alias="class")
    stats: Stats | None = None
    advantages: tuple[str, ...] = ()
    disadvantages: tuple[str, ...] = ()
    skills: tuple[Skill, ...] = ()

    # Older files write missing lists and class as null
    @field_validator("alias", "class_name", "advantages", "disadvantages", "skills", mode="before")
    @classmethod
    def null_as_default(cls, value, info: ValidationInfo):
        return cls.model_fields[info.field_name].default if value is None else value

    def identified_by(self, identifier: str) -> bool:
        return identifier == self.name or identifier in self.alias

    def skill_tags(self) -> set[str]:
        return {tag for skill in self.skills for tag in skill.tags}


class Roster(RootModel[tuple[Character, ...]]):
    """The characters loaded for one run, in file order."""

    model_config = ConfigDict(frozen=True)

    root: tuple[Character, ...]

    def __iter__(self) -> Iterator[Character]:
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)

    def __getitem__(self, index: int) -> Character:
        return self.root[index]

    def names(self) -> list[str]:
        return [character.name for character in self.root]
