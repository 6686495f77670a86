"""Response schema for the speedrun.com API."""

from speedrun_api.types.categories import (
    Category,
    CategoryType,
    Flags,
    Level,
    Players,
    Scope,
    Value,
    Values,
    Variable,
)
from speedrun_api.types.common import (
    Asset,
    Assets,
    Link,
    ModeratorRole,
    Names,
    Pagination,
    SpeedrunModel,
    TimingMethod,
)
from speedrun_api.types.games import Game, Ruleset, Series
from speedrun_api.types.lookups import (
    Developer,
    Engine,
    GameType,
    Genre,
    Platform,
    Publisher,
    Region,
)
from speedrun_api.types.runs import (
    GuestPlayer,
    Leaderboard,
    Player,
    RankedRun,
    Run,
    RunStatus,
    System,
    Times,
    UserPlayer,
    VideoLink,
    Videos,
)
from speedrun_api.types.users import (
    BasicLink,
    Color,
    Guest,
    Location,
    NameStyle,
    Notification,
    NotificationItem,
    Place,
    ReadStatus,
    User,
    UserRole,
)

__all__ = [
    "Asset",
    "Assets",
    "BasicLink",
    "Category",
    "CategoryType",
    "Color",
    "Developer",
    "Engine",
    "Flags",
    "Game",
    "GameType",
    "Genre",
    "Guest",
    "GuestPlayer",
    "Leaderboard",
    "Level",
    "Link",
    "Location",
    "ModeratorRole",
    "NameStyle",
    "Names",
    "Notification",
    "NotificationItem",
    "Pagination",
    "Place",
    "Platform",
    "Player",
    "Players",
    "Publisher",
    "RankedRun",
    "ReadStatus",
    "Region",
    "Ruleset",
    "Run",
    "RunStatus",
    "Scope",
    "Series",
    "SpeedrunModel",
    "System",
    "Times",
    "TimingMethod",
    "User",
    "UserPlayer",
    "UserRole",
    "Value",
    "Values",
    "Variable",
    "VideoLink",
    "Videos",
]
