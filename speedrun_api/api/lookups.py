"""Endpoints of the small lookup resources games refer to by id.

Developers, engines, game types, genres, platforms, publishers and regions
all share one shape: a pageable, sortable list and a by-id fetch.
"""

from __future__ import annotations

from enum import Enum

from pydantic import Field

from speedrun_api.api.common import Direction
from speedrun_api.api.endpoint import Endpoint
from speedrun_api.api.pagination import Pageable


class NameSorting(Enum):
    NAME = "name"


class PlatformsSorting(Enum):
    NAME = "name"
    RELEASED = "released"


class _LookupList(Pageable, Endpoint):
    orderby: NameSorting | None = None
    direction: Direction | None = None


class _LookupItem(Endpoint):
    id: str = Field(exclude=True)


class Developers(_LookupList):
    def endpoint(self) -> str:
        return "developers"


class Developer(_LookupItem):
    def endpoint(self) -> str:
        return f"developers/{self.id}"


class Engines(_LookupList):
    def endpoint(self) -> str:
        return "engines"


class Engine(_LookupItem):
    def endpoint(self) -> str:
        return f"engines/{self.id}"


class GameTypes(_LookupList):
    def endpoint(self) -> str:
        return "gametypes"


class GameType(_LookupItem):
    def endpoint(self) -> str:
        return f"gametypes/{self.id}"


class Genres(_LookupList):
    def endpoint(self) -> str:
        return "genres"


class Genre(_LookupItem):
    def endpoint(self) -> str:
        return f"genres/{self.id}"


class Platforms(_LookupList):
    orderby: PlatformsSorting | None = None

    def endpoint(self) -> str:
        return "platforms"


class Platform(_LookupItem):
    def endpoint(self) -> str:
        return f"platforms/{self.id}"


class Publishers(_LookupList):
    def endpoint(self) -> str:
        return "publishers"


class Publisher(_LookupItem):
    def endpoint(self) -> str:
        return f"publishers/{self.id}"


class Regions(Pageable, Endpoint):
    """Regions only sort by name, so only the direction is selectable."""

    direction: Direction | None = None

    def endpoint(self) -> str:
        return "regions"


class Region(_LookupItem):
    def endpoint(self) -> str:
        return f"regions/{self.id}"
