"""Notifications of the authenticated user."""

from __future__ import annotations

from enum import Enum

from speedrun_api.api.common import Direction
from speedrun_api.api.endpoint import Endpoint


class NotificationsSorting(Enum):
    CREATED = "created"


class Notifications(Endpoint):
    orderby: NotificationsSorting | None = None
    direction: Direction | None = None

    def endpoint(self) -> str:
        return "notifications"

    def requires_authentication(self) -> bool:
        return True
