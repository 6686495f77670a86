"""Categories, levels and variables."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import Field

from speedrun_api.types.common import Link, SpeedrunModel


class CategoryType(Enum):
    PER_GAME = "per-game"
    PER_LEVEL = "per-level"


class Players(SpeedrunModel):
    type: Literal["exactly", "up-to"]
    value: int


class Category(SpeedrunModel):
    id: str
    name: str
    weblink: str
    type: CategoryType
    rules: str | None = None
    players: Players
    miscellaneous: bool
    links: list[Link] = []


class Level(SpeedrunModel):
    id: str
    name: str
    weblink: str
    rules: str | None = None
    links: list[Link] = []


class GlobalScope(SpeedrunModel):
    type: Literal["global"]


class FullGameScope(SpeedrunModel):
    type: Literal["full-game"]


class AllLevelsScope(SpeedrunModel):
    type: Literal["all-levels"]


class SingleLevelScope(SpeedrunModel):
    type: Literal["single-level"]
    level: str


Scope = Annotated[
    Union[GlobalScope, FullGameScope, AllLevelsScope, SingleLevelScope],
    Field(discriminator="type"),
]


class Flags(SpeedrunModel):
    miscellaneous: bool | None = None


class Value(SpeedrunModel):
    label: str
    rules: str | None = None
    flags: Flags | None = None


class Values(SpeedrunModel):
    values: dict[str, Value] = {}
    default: str | None = None


class Variable(SpeedrunModel):
    id: str
    name: str
    category: str | None = None
    scope: Scope
    mandatory: bool
    user_defined: bool
    obsoletes: bool
    values: Values
    is_subcategory: bool = False
    links: list[Link] = []
