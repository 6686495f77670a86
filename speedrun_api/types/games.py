"""Game and series resources."""

from __future__ import annotations

from speedrun_api.types.common import (
    Assets,
    Link,
    ModeratorRole,
    Names,
    SpeedrunModel,
    TimingMethod,
)


class Ruleset(SpeedrunModel):
    show_milliseconds: bool
    require_verification: bool
    require_video: bool
    run_times: list[TimingMethod]
    default_time: TimingMethod
    emulators_allowed: bool


class Game(SpeedrunModel):
    id: str
    names: Names
    abbreviation: str
    weblink: str
    release_date: str | None = None
    ruleset: Ruleset
    gametypes: list[str] = []
    platforms: list[str] = []
    regions: list[str] = []
    genres: list[str] = []
    engines: list[str] = []
    developers: list[str] = []
    publishers: list[str] = []
    moderators: dict[str, ModeratorRole] = {}
    created: str | None = None
    assets: Assets
    links: list[Link] = []


class Series(SpeedrunModel):
    id: str
    names: Names
    abbreviation: str
    weblink: str
    moderators: dict[str, ModeratorRole] = {}
    created: str | None = None
    assets: Assets
    links: list[Link] = []
