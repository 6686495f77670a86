"""The authenticated user's own profile."""

from __future__ import annotations

from speedrun_api.api.endpoint import Endpoint


class Profile(Endpoint):
    def endpoint(self) -> str:
        return "profile"

    def requires_authentication(self) -> bool:
        return True
