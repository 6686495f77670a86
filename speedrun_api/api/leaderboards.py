"""Leaderboard endpoints.

Leaderboards can be narrowed by variable values. Those filters are sent as
``var-<variable id>=<value id>`` after the regular parameters.
"""

from __future__ import annotations

from pydantic import Field

from speedrun_api.api.common import LeaderboardEmbeds
from speedrun_api.api.endpoint import Endpoint, with_variables
from speedrun_api.types.common import TimingMethod


class _LeaderboardQuery(Endpoint):
    top: int | None = None
    platform: str | None = None
    region: str | None = None
    emulators: bool | None = None
    video_only: bool | None = None
    timing: TimingMethod | None = None
    date: str | None = None
    variables: dict[str, str] = Field(default_factory=dict, exclude=True)
    embed: frozenset[LeaderboardEmbeds] = frozenset()

    def query_parameters(self) -> list[tuple[str, str]]:
        return with_variables(super().query_parameters(), sorted(self.variables.items()))


class FullGameLeaderboard(_LeaderboardQuery):
    """Leaderboard of a full-game category.

    ``top`` counts places, so ties can return more runs. ``date`` (ISO 8601)
    rebuilds the leaderboard as it stood on that day.
    """

    game: str = Field(exclude=True)
    category: str = Field(exclude=True)

    def endpoint(self) -> str:
        return f"leaderboards/{self.game}/category/{self.category}"


class IndividualLevelLeaderboard(_LeaderboardQuery):
    """Leaderboard of one level within a per-level category."""

    game: str = Field(exclude=True)
    level: str = Field(exclude=True)
    category: str = Field(exclude=True)

    def endpoint(self) -> str:
        return f"leaderboards/{self.game}/level/{self.level}/{self.category}"
