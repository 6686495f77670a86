"""Variable endpoints."""

from __future__ import annotations

from pydantic import Field

from speedrun_api.api.endpoint import Endpoint


class Variable(Endpoint):
    id: str = Field(exclude=True)

    def endpoint(self) -> str:
        return f"variables/{self.id}"
