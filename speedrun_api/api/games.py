"""Game endpoints."""

from __future__ import annotations

from enum import Enum

from pydantic import Field

from speedrun_api.api.common import (
    CategoriesSorting,
    CategoryEmbeds,
    Direction,
    LeaderboardEmbeds,
    VariablesSorting,
)
from speedrun_api.api.endpoint import Endpoint
from speedrun_api.api.pagination import Pageable


class GameEmbeds(Enum):
    LEVELS = "levels"
    CATEGORIES = "categories"
    MODERATORS = "moderators"
    GAMETYPES = "gametypes"
    PLATFORMS = "platforms"
    REGIONS = "regions"
    GENRES = "genres"
    ENGINES = "engines"
    DEVELOPERS = "developers"
    PUBLISHERS = "publishers"
    VARIABLES = "variables"


class GamesSorting(Enum):
    NAME_INTERNATIONAL = "name.int"
    NAME_JAPANESE = "name.jap"
    ABBREVIATION = "abbreviation"
    RELEASED = "released"
    CREATED = "created"
    SIMILARITY = "similarity"


class LevelsSorting(Enum):
    NAME = "name"
    POS = "pos"


class LeaderboardScope(Enum):
    FULL_GAME = "full-game"
    LEVELS = "levels"
    ALL = "all"


class GameFilters(Endpoint):
    """Filters accepted by every game listing."""

    name: str | None = None
    abbreviation: str | None = None
    released: int | None = None
    gametype: str | None = None
    platform: str | None = None
    region: str | None = None
    genre: str | None = None
    engine: str | None = None
    developer: str | None = None
    publisher: str | None = None
    moderator: str | None = None
    bulk: bool | None = Field(None, alias="_bulk")
    orderby: GamesSorting | None = None
    direction: Direction | None = None
    embed: frozenset[GameEmbeds] = frozenset()


class Games(Pageable, GameFilters):
    """All games, optionally filtered.

    ``name`` is a fuzzy search over names and abbreviations. With ``bulk``
    the server returns a reduced representation and allows up to 1000 items
    per page; embeds are not allowed in bulk mode.
    """

    def endpoint(self) -> str:
        return "games"


class Game(Endpoint):
    id: str = Field(exclude=True)
    embed: frozenset[GameEmbeds] = frozenset()

    def endpoint(self) -> str:
        return f"games/{self.id}"


class GameCategories(Endpoint):
    id: str = Field(exclude=True)
    miscellaneous: bool | None = None
    orderby: CategoriesSorting | None = None
    direction: Direction | None = None
    embed: frozenset[CategoryEmbeds] = frozenset()

    def endpoint(self) -> str:
        return f"games/{self.id}/categories"


class GameLevels(Endpoint):
    id: str = Field(exclude=True)
    orderby: LevelsSorting | None = None
    direction: Direction | None = None

    def endpoint(self) -> str:
        return f"games/{self.id}/levels"


class GameVariables(Endpoint):
    id: str = Field(exclude=True)
    orderby: VariablesSorting | None = None
    direction: Direction | None = None

    def endpoint(self) -> str:
        return f"games/{self.id}/variables"


class GameDerivedGames(Pageable, GameFilters):
    """Games derived from (ROM hacks, category extensions of) game *id*."""

    id: str = Field(exclude=True)

    def endpoint(self) -> str:
        return f"games/{self.id}/derived-games"


class GameRecords(Pageable, Endpoint):
    """Top runs of every leaderboard of a game.

    ``top`` counts places, not runs, so ties can return more than ``top``
    runs per leaderboard.
    """

    id: str = Field(exclude=True)
    top: int | None = None
    scope: LeaderboardScope | None = None
    miscellaneous: bool | None = None
    skip_empty: bool | None = None
    embed: frozenset[LeaderboardEmbeds] = frozenset()

    def endpoint(self) -> str:
        return f"games/{self.id}/records"
