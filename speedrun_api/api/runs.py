"""Run endpoints.

Reading runs is anonymous. Submitting, moderating and deleting runs require
an API key; the matching descriptors refuse to build a request without one.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import ConfigDict, Field

from speedrun_api.api.common import Direction, RunEmbeds
from speedrun_api.api.client import Method
from speedrun_api.api.endpoint import Endpoint
from speedrun_api.api.pagination import Pageable
from speedrun_api.types.common import SpeedrunModel


class RunStatusFilter(Enum):
    NEW = "new"
    VERIFIED = "verified"
    REJECTED = "rejected"


class RunsSorting(Enum):
    GAME = "game"
    CATEGORY = "category"
    LEVEL = "level"
    PLATFORM = "platform"
    REGION = "region"
    EMULATED = "emulated"
    DATE = "date"
    SUBMITTED = "submitted"
    STATUS = "status"
    VERIFY_DATE = "verify-date"


# ── request bodies ──────────────────────────────────────────────────────────


class UserRef(SpeedrunModel):
    rel: Literal["user"] = "user"
    id: str


class GuestRef(SpeedrunModel):
    rel: Literal["guest"] = "guest"
    name: str


PlayerRef = Annotated[Union[UserRef, GuestRef], Field(discriminator="rel")]


class Verify(SpeedrunModel):
    status: Literal["verified"] = "verified"


class Reject(SpeedrunModel):
    status: Literal["rejected"] = "rejected"
    reason: str


NewStatus = Annotated[Union[Verify, Reject], Field(discriminator="status")]


class RunTimes(SpeedrunModel):
    """Times of a submitted run, in seconds."""

    model_config = ConfigDict(alias_generator=None)

    realtime: float | None = None
    realtime_noloads: float | None = None
    ingame: float | None = None


class VariableValue(SpeedrunModel):
    type: Literal["pre-defined", "user-defined"] = "pre-defined"
    value: str


# ── read endpoints ──────────────────────────────────────────────────────────


class Runs(Pageable, Endpoint):
    user: str | None = None
    guest: str | None = None
    examiner: str | None = None
    game: str | None = None
    level: str | None = None
    category: str | None = None
    platform: str | None = None
    region: str | None = None
    emulated: bool | None = None
    status: RunStatusFilter | None = None
    orderby: RunsSorting | None = None
    direction: Direction | None = None
    embed: frozenset[RunEmbeds] = frozenset()

    def endpoint(self) -> str:
        return "runs"


class Run(Endpoint):
    id: str = Field(exclude=True)
    embed: frozenset[RunEmbeds] = frozenset()

    def endpoint(self) -> str:
        return f"runs/{self.id}"


# ── write endpoints ─────────────────────────────────────────────────────────


class _RunWrite(Endpoint):
    """Base for authenticated operations whose fields form the JSON body."""

    def query_parameters(self) -> list[tuple[str, str]]:
        return []

    def requires_authentication(self) -> bool:
        return True


class CreateRun(_RunWrite):
    """Submit a new run.

    ``verified`` only takes effect when the submitting user moderates the
    game. Some games have mandatory variables.
    """

    category: str
    level: str | None = None
    date: str | None = None
    region: str | None = None
    platform: str | None = None
    verified: bool | None = None
    times: RunTimes
    players: list[PlayerRef] | None = None
    emulated: bool | None = None
    video: str | None = None
    comment: str | None = None
    splitsio: str | None = None
    variables: dict[str, VariableValue] | None = None

    def method(self) -> Method:
        return Method.POST

    def endpoint(self) -> str:
        return "runs"

    def body(self) -> tuple[str, bytes]:
        return self.json_body(root="run")


class UpdateRunStatus(_RunWrite):
    """Verify or reject a run. Requires moderator rights on the game."""

    id: str = Field(exclude=True)
    status: NewStatus

    def method(self) -> Method:
        return Method.PUT

    def endpoint(self) -> str:
        return f"runs/{self.id}/status"

    def body(self) -> tuple[str, bytes]:
        return self.json_body()


class UpdateRunPlayers(_RunWrite):
    """Replace the full player list of a run."""

    id: str = Field(exclude=True)
    players: list[PlayerRef] = Field(min_length=1)

    def method(self) -> Method:
        return Method.PUT

    def endpoint(self) -> str:
        return f"runs/{self.id}/players"

    def body(self) -> tuple[str, bytes]:
        return self.json_body()


class DeleteRun(_RunWrite):
    id: str = Field(exclude=True)

    def method(self) -> Method:
        return Method.DELETE

    def endpoint(self) -> str:
        return f"runs/{self.id}"
