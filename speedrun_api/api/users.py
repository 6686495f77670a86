"""User endpoints."""

from __future__ import annotations

from enum import Enum

from pydantic import Field

from speedrun_api.api.common import Direction, RunEmbeds
from speedrun_api.api.endpoint import Endpoint
from speedrun_api.api.pagination import Pageable


class UsersSorting(Enum):
    NAME_INTERNATIONAL = "name.int"
    NAME_JAPANESE = "name.jap"
    SIGNUP = "signup"
    ROLE = "role"


class Users(Pageable, Endpoint):
    """Users, searched by name or linked accounts.

    ``lookup`` does a case-insensitive exact match across the username and
    every linked account; the other filters match one field each.
    """

    lookup: str | None = None
    name: str | None = None
    twitch: str | None = None
    hitbox: str | None = None
    twitter: str | None = None
    speedrunslive: str | None = None
    orderby: UsersSorting | None = None
    direction: Direction | None = None

    def endpoint(self) -> str:
        return "users"


class User(Endpoint):
    id: str = Field(exclude=True)

    def endpoint(self) -> str:
        return f"users/{self.id}"


class UserPersonalBests(Endpoint):
    id: str = Field(exclude=True)
    top: int | None = None
    series: str | None = None
    game: str | None = None
    embed: frozenset[RunEmbeds] = frozenset()

    def endpoint(self) -> str:
        return f"users/{self.id}/personal-bests"
