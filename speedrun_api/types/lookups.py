"""Small lookup resources referenced by games."""

from __future__ import annotations

from speedrun_api.types.common import Link, SpeedrunModel


class _NamedResource(SpeedrunModel):
    id: str
    name: str
    links: list[Link] = []


class Developer(_NamedResource):
    pass


class Engine(_NamedResource):
    pass


class Genre(_NamedResource):
    pass


class Publisher(_NamedResource):
    pass


class Region(_NamedResource):
    pass


class GameType(_NamedResource):
    allows_base_game: bool = False


class Platform(_NamedResource):
    released: int | None = None
