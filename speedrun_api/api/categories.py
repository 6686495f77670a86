"""Category endpoints."""

from __future__ import annotations

from pydantic import Field

from speedrun_api.api.common import (
    CategoryEmbeds,
    Direction,
    LeaderboardEmbeds,
    VariablesSorting,
)
from speedrun_api.api.endpoint import Endpoint
from speedrun_api.api.pagination import Pageable


class Category(Endpoint):
    id: str = Field(exclude=True)
    embed: frozenset[CategoryEmbeds] = frozenset()

    def endpoint(self) -> str:
        return f"categories/{self.id}"


class CategoryVariables(Endpoint):
    id: str = Field(exclude=True)
    orderby: VariablesSorting | None = None
    direction: Direction | None = None

    def endpoint(self) -> str:
        return f"categories/{self.id}/variables"


class CategoryRecords(Pageable, Endpoint):
    """Top runs of every leaderboard in a category."""

    id: str = Field(exclude=True)
    top: int | None = None
    skip_empty: bool | None = None
    embed: frozenset[LeaderboardEmbeds] = frozenset()

    def endpoint(self) -> str:
        return f"categories/{self.id}/records"
