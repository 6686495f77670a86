"""Guest endpoints."""

from __future__ import annotations

from urllib.parse import quote

from pydantic import Field

from speedrun_api.api.endpoint import Endpoint


class Guest(Endpoint):
    """A guest player, looked up by name."""

    name: str = Field(exclude=True)

    def endpoint(self) -> str:
        return f"guests/{quote(self.name, safe='')}"
