"""Users, guests and notifications."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import Field

from speedrun_api.types.common import Link, Names, SpeedrunModel


class Color(SpeedrunModel):
    light: str
    dark: str


class SolidNameStyle(SpeedrunModel):
    style: Literal["solid"]
    color: Color


class GradientNameStyle(SpeedrunModel):
    style: Literal["gradient"]
    color_from: Color
    color_to: Color


NameStyle = Annotated[
    Union[SolidNameStyle, GradientNameStyle],
    Field(discriminator="style"),
]


class UserRole(Enum):
    BANNED = "banned"
    USER = "user"
    TRUSTED = "trusted"
    MODERATOR = "moderator"
    ADMIN = "admin"
    PROGRAMMER = "programmer"


class Place(SpeedrunModel):
    code: str
    names: Names


class Location(SpeedrunModel):
    country: Place
    region: Place | None = None


class BasicLink(SpeedrunModel):
    uri: str


class User(SpeedrunModel):
    id: str
    names: Names
    pronouns: str | None = None
    weblink: str
    name_style: NameStyle
    role: UserRole
    signup: str | None = None
    location: Location | None = None
    twitch: BasicLink | None = None
    hitbox: BasicLink | None = None
    youtube: BasicLink | None = None
    twitter: BasicLink | None = None
    speedrunslive: BasicLink | None = None
    links: list[Link] = []


class Guest(SpeedrunModel):
    name: str
    links: list[Link] = []


class ReadStatus(Enum):
    READ = "read"
    UNREAD = "unread"


class NotificationItem(SpeedrunModel):
    rel: Literal["post", "run", "game", "guide"]
    uri: str


class Notification(SpeedrunModel):
    id: str
    created: str
    status: ReadStatus
    text: str
    item: NotificationItem
    links: list[Link] = []
