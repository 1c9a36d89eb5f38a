"""Pydantic models for client configuration, request options and error envelopes."""

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from .constants import (
    DEFAULT_LANGUAGE,
    AccountType,
    CosmeticType,
    GameMode,
    KeyFormat,
    Language,
    MatchMethod,
    StatsImage,
    TimeWindow,
)


class ClientConfig(BaseModel):
    """Immutable configuration owned by a client instance."""

    key: Optional[str] = None
    language: Language = DEFAULT_LANGUAGE

    model_config = ConfigDict(frozen=True)


class RequestOptions(BaseModel):
    """Base class for per-call option objects."""

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="forbid")

    def to_params(self, exclude: Optional[set] = None) -> Dict[str, Any]:
        """
        Dump set options as query parameters.

        Keys use the API's camelCase names and follow field declaration order.
        Options left as ``None`` are omitted.
        """
        return self.model_dump(by_alias=True, exclude_none=True, exclude=exclude)


class LanguageOptions(RequestOptions):
    """Options for endpoints that only accept a language."""

    language: Optional[Language] = None


class KeyOptions(RequestOptions):
    """Options for fetching the current AES key."""

    key_format: KeyFormat = Field(KeyFormat.HEX, alias="keyFormat")


class CosmeticsOptions(LanguageOptions):
    """Options for fetching a cosmetics listing."""

    cosmetic_type: Optional[CosmeticType] = Field(None, alias="cosmeticType")


class ListCosmeticsOptions(LanguageOptions):
    """Options for listing Battle Royale cosmetics."""

    new: bool = False


class CosmeticSearchOptions(LanguageOptions):
    """Filters for finding one cosmetic or filtering many."""

    search_language: Optional[Language] = Field(None, alias="searchLanguage")
    match_method: Optional[MatchMethod] = Field(None, alias="matchMethod")
    id: Optional[Union[str, List[str]]] = None
    name: Optional[str] = None
    description: Optional[str] = None
    type: Optional[str] = None
    display_type: Optional[str] = Field(None, alias="displayType")
    backend_type: Optional[str] = Field(None, alias="backendType")
    rarity: Optional[str] = None
    display_rarity: Optional[str] = Field(None, alias="displayRarity")
    backend_rarity: Optional[str] = Field(None, alias="backendRarity")
    has_series: Optional[bool] = Field(None, alias="hasSeries")
    series: Optional[str] = None
    backend_series: Optional[str] = Field(None, alias="backendSeries")
    has_set: Optional[bool] = Field(None, alias="hasSet")
    set: Optional[str] = None
    set_text: Optional[str] = Field(None, alias="setText")
    backend_set: Optional[str] = Field(None, alias="backendSet")
    has_introduction: Optional[bool] = Field(None, alias="hasIntroduction")
    backend_introduction: Optional[int] = Field(None, alias="backendIntroduction")
    introduction_chapter: Optional[str] = Field(None, alias="introductionChapter")
    introduction_season: Optional[str] = Field(None, alias="introductionSeason")
    has_featured_image: Optional[bool] = Field(None, alias="hasFeaturedImage")
    has_variants: Optional[bool] = Field(None, alias="hasVariants")
    has_gameplay_tags: Optional[bool] = Field(None, alias="hasGameplayTags")
    gameplay_tag: Optional[str] = Field(None, alias="gameplayTag")
    has_meta_tags: Optional[bool] = Field(None, alias="hasMetaTags")
    meta_tag: Optional[str] = Field(None, alias="metaTag")
    has_dynamic_pak_id: Optional[bool] = Field(None, alias="hasDynamicPakId")
    dynamic_pak_id: Optional[str] = Field(None, alias="dynamicPakId")
    added: Optional[int] = None
    added_since: Optional[int] = Field(None, alias="addedSince")
    unseen_for: Optional[int] = Field(None, alias="unseenFor")
    last_appearance: Optional[int] = Field(None, alias="lastAppearance")


class NewsOptions(LanguageOptions):
    """Options for fetching news; no mode means every mode."""

    mode: Optional[GameMode] = None


class PlaylistOptions(LanguageOptions):
    """Options for fetching playlists; no id means the full list."""

    id: Optional[str] = None


class ShopOptions(LanguageOptions):
    """Options for fetching the Battle Royale shop."""

    combined: bool = False


class StatsOptions(RequestOptions):
    """Options for fetching Battle Royale stats by account name or id."""

    name: Optional[str] = None
    id: Optional[str] = None
    account_type: Optional[AccountType] = Field(None, alias="accountType")
    time_window: Optional[TimeWindow] = Field(None, alias="timeWindow")
    image: Optional[StatsImage] = None


class SuccessEnvelope(BaseModel):
    """200 response body returned by Fortnite-API."""

    status: int = 200
    data: Any

    model_config = ConfigDict(extra="allow")


class ErrorEnvelope(BaseModel):
    """Non-200 response body returned by Fortnite-API."""

    status: Optional[int] = None
    error: Any = None

    model_config = ConfigDict(extra="allow")

    @property
    def message(self) -> str:
        """The error text, or an empty string when the API sent none."""
        if self.error is None:
            return ""
        return str(self.error)
