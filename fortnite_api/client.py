"""Fortnite-API HTTP client with envelope unwrapping and typed errors."""

import asyncio
from typing import Any, Dict, List, Optional, Type, TypeVar, Union

import httpx

from .constants import CosmeticType, GameMode, KeyFormat, Language
from .core.config import Settings, get_global_settings
from .core.logging import get_logger
from .endpoints import (
    ACCOUNT_ID_TOKEN,
    COSMETIC_ID_TOKEN,
    PLAYLIST_ID_TOKEN,
    Endpoints,
)
from .envelope import unwrap
from .errors import ConfigurationError
from .models import (
    ClientConfig,
    CosmeticSearchOptions,
    CosmeticsOptions,
    KeyOptions,
    LanguageOptions,
    ListCosmeticsOptions,
    NewsOptions,
    PlaylistOptions,
    RequestOptions,
    ShopOptions,
    StatsOptions,
)
from .query import build_url

logger = get_logger(__name__)

OptionsT = TypeVar("OptionsT", bound=RequestOptions)

COSMETIC_ENDPOINTS: Dict[Optional[CosmeticType], Endpoints] = {
    None: Endpoints.COSMETICS,
    CosmeticType.NEW: Endpoints.NEW_ALL_COSMETICS,
    CosmeticType.TRACKS: Endpoints.TRACKS,
    CosmeticType.CARS: Endpoints.CARS,
    CosmeticType.INSTRUMENTS: Endpoints.INSTRUMENTS,
    CosmeticType.LEGO: Endpoints.LEGO,
    CosmeticType.LEGO_KITS: Endpoints.LEGO_KITS,
}

NEWS_ENDPOINTS: Dict[Optional[GameMode], Endpoints] = {
    None: Endpoints.NEWS,
    GameMode.BATTLE_ROYALE: Endpoints.BR_NEWS,
    GameMode.SAVE_THE_WORLD: Endpoints.STW_NEWS,
    GameMode.CREATIVE: Endpoints.CREATIVE_NEWS,
}


class FortniteAPIClient:
    """Client whose methods fetch data from Fortnite-API."""

    def __init__(
        self,
        key: Optional[str] = None,
        language: Optional[Union[Language, str]] = None,
        *,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: Optional[float] = None,
    ):
        """
        Initialize Fortnite-API client.

        Args:
            key: API key for stats requests (uses config if None)
            language: Default language for localized endpoints (uses config if None)
            settings: Settings to read defaults from (uses global settings if None)
            transport: Custom httpx transport, e.g. ``httpx.MockTransport``
            timeout: Request timeout in seconds (uses config if None)
        """
        settings = settings or get_global_settings()
        self.config = ClientConfig(
            key=key if key is not None else settings.key,
            language=language if language is not None else settings.language,
        )
        self.timeout = timeout if timeout is not None else settings.timeout
        self.user_agent = settings.user_agent
        self.transport = transport

        # HTTP session
        self.session: Optional[httpx.AsyncClient] = None
        self._session_lock = asyncio.Lock()

    @property
    def key(self) -> Optional[str]:
        """The API key sent with stats requests."""
        return self.config.key

    @property
    def language(self) -> Language:
        """The default language for localized endpoints."""
        return self.config.language

    async def __aenter__(self):
        """Async context manager entry."""
        await self.start_session()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object | None,
    ) -> None:
        """Async context manager exit."""
        await self.close()

    async def start_session(self) -> None:
        """Start the httpx session."""
        if self.session is None or self.session.is_closed:
            async with self._session_lock:
                if self.session is None or self.session.is_closed:
                    self.session = httpx.AsyncClient(
                        headers={
                            "Accept": "application/json",
                            "User-Agent": self.user_agent,
                        },
                        timeout=httpx.Timeout(self.timeout),
                        transport=self.transport,
                    )

                    logger.info(
                        "Fortnite-API client session started",
                        language=self.language.value,
                        api_key="[REDACTED]" if self.key else "None",
                    )

    async def close(self) -> None:
        """Close the httpx session."""
        if self.session and not self.session.is_closed:
            await self.session.aclose()
            logger.info("Fortnite-API client session closed")

    async def _request(self, route: str, authorization: bool = False) -> Any:
        """
        Issue a GET request and unwrap the response envelope.

        Args:
            route: Fully built request URL
            authorization: Attach the API key, if one is configured

        Returns:
            The envelope's ``data`` payload

        Raises:
            FortniteAPIError: If the API answers with an error envelope
            httpx.HTTPError: On transport failures
        """
        await self.start_session()

        headers: Dict[str, str] = {}
        if authorization and self.key is not None:
            headers["Authorization"] = self.key

        logger.debug(
            "Requesting Fortnite-API", route=route, authorized="Authorization" in headers
        )
        response = await self.session.get(route, headers=headers)
        return unwrap(response.json(), route, response.status_code)

    def _resolve_language(self, language: Optional[Union[Language, str]]) -> Language:
        """Return the per-call language, falling back to the client default."""
        resolved = LanguageOptions(language=language).language
        return resolved if resolved is not None else self.language

    @staticmethod
    def _resolve_options(
        options_cls: Type[OptionsT],
        options: Optional[OptionsT],
        overrides: Dict[str, Any],
    ) -> OptionsT:
        """Build an options object from either a model instance or keyword arguments."""
        if options is None:
            return options_cls(**overrides)
        if overrides:
            raise ConfigurationError(
                f"Pass either a {options_cls.__name__} or keyword arguments, not both"
            )
        return options

    # AES
    async def aes(self, key_format: Union[KeyFormat, str] = KeyFormat.HEX) -> Dict[str, Any]:
        """Fetch the current AES key in the given format."""
        options = KeyOptions(key_format=key_format)
        return await self._request(build_url(Endpoints.AES, options.to_params()))

    # Banners
    async def banners(
        self, language: Optional[Union[Language, str]] = None
    ) -> List[Dict[str, Any]]:
        """Fetch every banner."""
        params = {"language": self._resolve_language(language)}
        return await self._request(build_url(Endpoints.BANNERS, params))

    async def banner_colors(self) -> List[Dict[str, Any]]:
        """Fetch every banner color."""
        return await self._request(build_url(Endpoints.BANNER_COLORS, {}))

    # Cosmetics
    async def cosmetics(
        self, options: Optional[CosmeticsOptions] = None, **kwargs: Any
    ) -> Any:
        """
        Fetch a cosmetics listing.

        Without a ``cosmetic_type`` every cosmetic is returned, keyed by
        category. Otherwise only the listing for that type is returned.
        """
        options = self._resolve_options(CosmeticsOptions, options, kwargs)
        params = {"language": self._resolve_language(options.language)}
        endpoint = COSMETIC_ENDPOINTS[options.cosmetic_type]
        return await self._request(build_url(endpoint, params))

    async def list_cosmetics(
        self, options: Optional[ListCosmeticsOptions] = None, **kwargs: Any
    ) -> Any:
        """List Battle Royale cosmetics, or only recently released ones with ``new=True``."""
        options = self._resolve_options(ListCosmeticsOptions, options, kwargs)
        params = {"language": self._resolve_language(options.language)}
        endpoint = Endpoints.NEW_BR_COSMETICS if options.new else Endpoints.BR_COSMETICS
        return await self._request(build_url(endpoint, params))

    async def find_cosmetic(
        self, options: Optional[CosmeticSearchOptions] = None, **kwargs: Any
    ) -> Dict[str, Any]:
        """
        Find the first cosmetic matching the search parameters.

        With an ``id`` the cosmetic is fetched directly and every other filter
        is ignored.

        Raises:
            ConfigurationError: If ``id`` is a list
        """
        options = self._resolve_options(CosmeticSearchOptions, options, kwargs)
        language = self._resolve_language(options.language)

        if options.id is None:
            params = options.to_params()
            params["language"] = language
            return await self._request(build_url(Endpoints.COSMETICS_SEARCH, params))

        if not isinstance(options.id, str):
            raise ConfigurationError(
                "find_cosmetic() takes a single id; use filter_cosmetics() for several"
            )
        endpoint = Endpoints.COSMETICS_BY_ID.substitute(COSMETIC_ID_TOKEN, options.id)
        return await self._request(build_url(endpoint, {"language": language}))

    async def filter_cosmetics(
        self, options: Optional[CosmeticSearchOptions] = None, **kwargs: Any
    ) -> List[Dict[str, Any]]:
        """
        Find every cosmetic matching the search parameters.

        With an ``id`` (or list of ids) the cosmetics are looked up by id and
        every other filter is ignored.
        """
        options = self._resolve_options(CosmeticSearchOptions, options, kwargs)
        language = self._resolve_language(options.language)

        if options.id is None:
            params = options.to_params()
            params["language"] = language
            return await self._request(build_url(Endpoints.COSMETICS_SEARCH_ALL, params))

        ids = [options.id] if isinstance(options.id, str) else list(options.id)
        params = {"id": ids, "language": language}
        return await self._request(build_url(Endpoints.COSMETICS_SEARCH_BY_IDS, params))

    # Creator codes
    async def creator_code(self, name: str) -> Dict[str, Any]:
        """Fetch information about a creator code."""
        return await self._request(build_url(Endpoints.CREATOR_CODE, {"name": name}))

    # Map
    async def map(self, language: Optional[Union[Language, str]] = None) -> Dict[str, Any]:
        """Fetch the current Battle Royale map and its points of interest."""
        params = {"language": self._resolve_language(language)}
        return await self._request(build_url(Endpoints.MAP, params))

    # News
    async def news(self, options: Optional[NewsOptions] = None, **kwargs: Any) -> Dict[str, Any]:
        """Fetch one mode's news, or every mode's news when no ``mode`` is given."""
        options = self._resolve_options(NewsOptions, options, kwargs)
        params = {"language": self._resolve_language(options.language)}
        return await self._request(build_url(NEWS_ENDPOINTS[options.mode], params))

    # Playlists
    async def playlists(
        self, options: Optional[PlaylistOptions] = None, **kwargs: Any
    ) -> Any:
        """Fetch a playlist by ``id``, or every playlist when no id is given."""
        options = self._resolve_options(PlaylistOptions, options, kwargs)
        params = {"language": self._resolve_language(options.language)}
        if options.id is None:
            return await self._request(build_url(Endpoints.PLAYLISTS, params))

        endpoint = Endpoints.PLAYLIST_BY_ID.substitute(PLAYLIST_ID_TOKEN, options.id)
        return await self._request(build_url(endpoint, params))

    # Shop
    async def shop(self, language: Optional[Union[Language, str]] = None) -> Dict[str, Any]:
        """Fetch the current item shop."""
        params = {"language": self._resolve_language(language)}
        return await self._request(build_url(Endpoints.SHOP, params))

    async def br_shop(
        self, options: Optional[ShopOptions] = None, **kwargs: Any
    ) -> Dict[str, Any]:
        """Fetch the Battle Royale shop, with normal and special sections merged if ``combined``."""
        options = self._resolve_options(ShopOptions, options, kwargs)
        params = {"language": self._resolve_language(options.language)}
        endpoint = Endpoints.BR_SHOP_COMBINED if options.combined else Endpoints.BR_SHOP
        return await self._request(build_url(endpoint, params))

    # Stats
    async def stats(
        self, options: Optional[StatsOptions] = None, **kwargs: Any
    ) -> Dict[str, Any]:
        """
        Fetch an account's Battle Royale stats by name or by account id.

        Args:
            options: Stats options; alternatively pass the fields as keyword arguments

        Returns:
            The account's stats

        Raises:
            ConfigurationError: If no API key is configured, or the options
                don't identify exactly one account
            FortniteAPIError: If the API answers with an error envelope
        """
        if self.key is None:
            raise ConfigurationError(
                "stats() requires an API key passed to the client or set as "
                "FORTNITE_API_KEY. You may request one at https://dash.fortnite-api.com/account"
            )

        options = self._resolve_options(StatsOptions, options, kwargs)
        self._validate_stats_options(options)

        if options.name is not None:
            route = build_url(Endpoints.BR_STATS, options.to_params())
        else:
            endpoint = Endpoints.BR_STATS_BY_ACCOUNT_ID.substitute(ACCOUNT_ID_TOKEN, options.id)
            route = build_url(endpoint, options.to_params(exclude={"id"}))

        return await self._request(route, authorization=True)

    @staticmethod
    def _validate_stats_options(options: StatsOptions) -> None:
        """Check that stats options identify exactly one account."""
        has_name = options.name is not None
        has_id = options.id is not None

        if not has_name and not has_id:
            raise ConfigurationError(
                'Neither the "name" nor the "id" stats option was provided'
            )
        if has_name and has_id:
            raise ConfigurationError(
                'The "name" and "id" stats options are mutually exclusive'
            )
        if has_id and options.account_type is not None:
            raise ConfigurationError(
                'The "id" and "account_type" stats options are mutually exclusive'
            )


Client = FortniteAPIClient
