"""Fortnite-API endpoint definitions."""

from enum import Enum

BASE_URL = "https://fortnite-api.com"

COSMETIC_ID_TOKEN = "{cosmetic-id}"
PLAYLIST_ID_TOKEN = "{playlist-id}"
ACCOUNT_ID_TOKEN = "{accountId}"


class Endpoints(str, Enum):
    """URL templates for every Fortnite-API route the client calls."""

    AES = f"{BASE_URL}/v2/aes"

    BANNERS = f"{BASE_URL}/v1/banners"
    BANNER_COLORS = f"{BASE_URL}/v1/banners/colors"

    COSMETICS = f"{BASE_URL}/v2/cosmetics"
    NEW_ALL_COSMETICS = f"{BASE_URL}/v2/cosmetics/new"
    BR_COSMETICS = f"{BASE_URL}/v2/cosmetics/br"
    NEW_BR_COSMETICS = f"{BASE_URL}/v2/cosmetics/br/new"
    COSMETICS_BY_ID = f"{BASE_URL}/v2/cosmetics/br/{COSMETIC_ID_TOKEN}"
    COSMETICS_SEARCH = f"{BASE_URL}/v2/cosmetics/br/search"
    COSMETICS_SEARCH_ALL = f"{BASE_URL}/v2/cosmetics/br/search/all"
    COSMETICS_SEARCH_BY_IDS = f"{BASE_URL}/v2/cosmetics/br/search/ids"
    TRACKS = f"{BASE_URL}/v2/cosmetics/tracks"
    CARS = f"{BASE_URL}/v2/cosmetics/cars"
    INSTRUMENTS = f"{BASE_URL}/v2/cosmetics/instruments"
    LEGO = f"{BASE_URL}/v2/cosmetics/lego"
    LEGO_KITS = f"{BASE_URL}/v2/cosmetics/lego/kits"

    CREATOR_CODE = f"{BASE_URL}/v2/creatorcode"

    MAP = f"{BASE_URL}/v1/map"

    NEWS = f"{BASE_URL}/v2/news"
    BR_NEWS = f"{BASE_URL}/v2/news/br"
    STW_NEWS = f"{BASE_URL}/v2/news/stw"
    CREATIVE_NEWS = f"{BASE_URL}/v2/news/creative"

    PLAYLISTS = f"{BASE_URL}/v1/playlists"
    PLAYLIST_BY_ID = f"{BASE_URL}/v1/playlists/{PLAYLIST_ID_TOKEN}"

    SHOP = f"{BASE_URL}/v2/shop"
    BR_SHOP = f"{BASE_URL}/v2/shop/br"
    BR_SHOP_COMBINED = f"{BASE_URL}/v2/shop/br/combined"

    BR_STATS = f"{BASE_URL}/v2/stats/br/v2"
    BR_STATS_BY_ACCOUNT_ID = f"{BASE_URL}/v2/stats/br/v2/{ACCOUNT_ID_TOKEN}"

    def substitute(self, token: str, value: str) -> str:
        """
        Replace a placeholder token in this template.

        The replacement is literal; ``value`` must already be URL-safe.

        Args:
            token: Placeholder to replace, e.g. ``"{cosmetic-id}"``
            value: Caller-supplied path segment

        Returns:
            The template with every occurrence of ``token`` replaced
        """
        return self.value.replace(token, value)
