"""
Fortnite-API client package.

This package provides an async HTTP client for the Fortnite-API REST service,
including request URL construction, envelope unwrapping and typed errors.
"""

from .client import Client, FortniteAPIClient
from .constants import (
    AccountType,
    CosmeticType,
    GameMode,
    KeyFormat,
    Language,
    MatchMethod,
    StatsImage,
    TimeWindow,
)
from .endpoints import Endpoints
from .errors import ConfigurationError, FortniteAPIError
from .models import (
    ClientConfig,
    CosmeticSearchOptions,
    CosmeticsOptions,
    ListCosmeticsOptions,
    NewsOptions,
    PlaylistOptions,
    ShopOptions,
    StatsOptions,
)
from .query import build_url

__all__ = [
    "Client",
    "FortniteAPIClient",
    "AccountType",
    "CosmeticType",
    "GameMode",
    "KeyFormat",
    "Language",
    "MatchMethod",
    "StatsImage",
    "TimeWindow",
    "Endpoints",
    "ConfigurationError",
    "FortniteAPIError",
    "ClientConfig",
    "CosmeticSearchOptions",
    "CosmeticsOptions",
    "ListCosmeticsOptions",
    "NewsOptions",
    "PlaylistOptions",
    "ShopOptions",
    "StatsOptions",
    "build_url",
]
