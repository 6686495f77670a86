"""Shared pieces of the speedrun.com response schema."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


def to_kebab(name: str) -> str:
    return name.replace("_", "-")


class SpeedrunModel(BaseModel):
    """Base for response models: kebab-case on the wire, unknown keys ignored."""

    model_config = ConfigDict(
        alias_generator=to_kebab,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )


class Link(SpeedrunModel):
    rel: str
    uri: str


class Pagination(SpeedrunModel):
    """Page metadata echoed by the server for list endpoints."""

    offset: int = 0
    max: int = 0
    size: int = 0
    links: list[Link] = []


class Names(SpeedrunModel):
    international: str
    japanese: str | None = None
    twitch: str | None = None


class Asset(SpeedrunModel):
    uri: str
    width: int | None = None
    height: int | None = None


class Assets(SpeedrunModel):
    logo: Asset | None = None
    cover_tiny: Asset | None = None
    cover_small: Asset | None = None
    cover_medium: Asset | None = None
    cover_large: Asset | None = None
    icon: Asset | None = None
    trophy_1st: Asset | None = None
    trophy_2nd: Asset | None = None
    trophy_3rd: Asset | None = None
    trophy_4th: Asset | None = None
    background: Asset | None = None
    foreground: Asset | None = None


class ModeratorRole(Enum):
    MODERATOR = "moderator"
    SUPER_MODERATOR = "super-moderator"


class TimingMethod(Enum):
    REALTIME = "realtime"
    REALTIME_NOLOADS = "realtime_noloads"
    INGAME = "ingame"
