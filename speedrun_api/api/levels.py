"""Level endpoints."""

from __future__ import annotations

from enum import Enum

from pydantic import Field

from speedrun_api.api.common import (
    CategoriesSorting,
    Direction,
    LeaderboardEmbeds,
    VariablesSorting,
)
from speedrun_api.api.endpoint import Endpoint
from speedrun_api.api.pagination import Pageable


class LevelEmbeds(Enum):
    CATEGORIES = "categories"
    VARIABLES = "variables"


class Level(Endpoint):
    id: str = Field(exclude=True)
    embed: frozenset[LevelEmbeds] = frozenset()

    def endpoint(self) -> str:
        return f"levels/{self.id}"


class LevelCategories(Endpoint):
    id: str = Field(exclude=True)
    miscellaneous: bool | None = None
    orderby: CategoriesSorting | None = None
    direction: Direction | None = None

    def endpoint(self) -> str:
        return f"levels/{self.id}/categories"


class LevelVariables(Endpoint):
    id: str = Field(exclude=True)
    orderby: VariablesSorting | None = None
    direction: Direction | None = None

    def endpoint(self) -> str:
        return f"levels/{self.id}/variables"


class LevelRecords(Pageable, Endpoint):
    id: str = Field(exclude=True)
    top: int | None = None
    skip_empty: bool | None = None
    embed: frozenset[LeaderboardEmbeds] = frozenset()

    def endpoint(self) -> str:
        return f"levels/{self.id}/records"
