"""Series endpoints."""

from __future__ import annotations

from enum import Enum

from pydantic import Field

from speedrun_api.api.common import Direction
from speedrun_api.api.endpoint import Endpoint
from speedrun_api.api.games import GameFilters
from speedrun_api.api.pagination import Pageable


class SeriesEmbeds(Enum):
    MODERATORS = "moderators"


class SeriesSorting(Enum):
    NAME_INTERNATIONAL = "name.int"
    NAME_JAPANESE = "name.jap"
    ABBREVIATION = "abbreviation"
    CREATED = "created"


class ListSeries(Pageable, Endpoint):
    name: str | None = None
    abbreviation: str | None = None
    moderator: str | None = None
    orderby: SeriesSorting | None = None
    direction: Direction | None = None
    embed: frozenset[SeriesEmbeds] = frozenset()

    def endpoint(self) -> str:
        return "series"


class Series(Endpoint):
    id: str = Field(exclude=True)
    embed: frozenset[SeriesEmbeds] = frozenset()

    def endpoint(self) -> str:
        return f"series/{self.id}"


class SeriesGames(Pageable, GameFilters):
    """Games of series *id*, with the same filters as the game list."""

    id: str = Field(exclude=True)

    def endpoint(self) -> str:
        return f"series/{self.id}/games"
