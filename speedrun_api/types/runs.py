"""Runs and leaderboards."""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import ConfigDict, Field

from speedrun_api.types.common import Link, SpeedrunModel, TimingMethod


class VideoLink(SpeedrunModel):
    uri: str


class Videos(SpeedrunModel):
    text: str | None = None
    links: list[VideoLink] = []


class NewStatus(SpeedrunModel):
    status: Literal["new"]


class VerifiedStatus(SpeedrunModel):
    status: Literal["verified"]
    examiner: str | None = None
    verify_date: str | None = None


class RejectedStatus(SpeedrunModel):
    status: Literal["rejected"]
    examiner: str
    reason: str


RunStatus = Annotated[
    Union[NewStatus, VerifiedStatus, RejectedStatus],
    Field(discriminator="status"),
]


class UserPlayer(SpeedrunModel):
    rel: Literal["user"]
    id: str
    uri: str


class GuestPlayer(SpeedrunModel):
    rel: Literal["guest"]
    name: str
    uri: str


Player = Annotated[Union[UserPlayer, GuestPlayer], Field(discriminator="rel")]


class Times(SpeedrunModel):
    # The times object is the one snake_case corner of the API.
    model_config = ConfigDict(alias_generator=None)

    primary: str
    primary_t: float
    realtime: str | None = None
    realtime_t: float = 0.0
    realtime_noloads: str | None = None
    realtime_noloads_t: float = 0.0
    ingame: str | None = None
    ingame_t: float = 0.0


class System(SpeedrunModel):
    platform: str | None = None
    emulated: bool = False
    region: str | None = None


class Run(SpeedrunModel):
    id: str
    weblink: str
    game: str
    level: str | None = None
    category: str
    videos: Videos | None = None
    comment: str | None = None
    status: RunStatus
    players: list[Player] = []
    date: str | None = None
    submitted: str | None = None
    times: Times
    system: System = System()
    splits: Link | None = None
    values: dict[str, str] = {}
    links: list[Link] | None = None


class RankedRun(SpeedrunModel):
    place: int
    run: Run


class Leaderboard(SpeedrunModel):
    weblink: str
    game: str
    category: str
    level: str | None = None
    platform: str | None = None
    region: str | None = None
    emulators: bool | None = None
    video_only: bool = False
    timing: TimingMethod | None = None
    values: dict[str, str] = {}
    runs: list[RankedRun] = []
    links: list[Link] = []
