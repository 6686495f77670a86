"""Sorting and embed enums shared by several resources."""

from __future__ import annotations

from enum import Enum


class Direction(Enum):
    ASC = "asc"
    DESC = "desc"


class CategoriesSorting(Enum):
    """Sort order for category lists (server default: ``pos``)."""

    NAME = "name"
    MISCELLANEOUS = "miscellaneous"
    POS = "pos"


class VariablesSorting(Enum):
    """Sort order for variable lists (server default: ``pos``)."""

    NAME = "name"
    MANDATORY = "mandatory"
    USER_DEFINED = "user-defined"
    POS = "pos"


class LeaderboardEmbeds(Enum):
    GAME = "game"
    CATEGORY = "category"
    LEVEL = "level"
    PLAYERS = "players"
    REGIONS = "regions"
    PLATFORMS = "platforms"
    VARIABLES = "variables"


class CategoryEmbeds(Enum):
    GAME = "game"
    VARIABLES = "variables"


class RunEmbeds(Enum):
    GAME = "game"
    CATEGORY = "category"
    LEVEL = "level"
    PLAYERS = "players"
    REGION = "region"
    PLATFORM = "platform"
