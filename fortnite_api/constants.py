"""Fortnite-API constants and enum definitions."""

from enum import Enum


class Language(str, Enum):
    """Languages supported by localized endpoints."""

    ARABIC = "ar"
    GERMAN = "de"
    ENGLISH = "en"
    SPANISH = "es"
    SPANISH_LATIN_AMERICA = "es-419"
    FRENCH = "fr"
    ITALIAN = "it"
    JAPANESE = "ja"
    KOREAN = "ko"
    POLISH = "pl"
    PORTUGUESE_BRAZIL = "pt-BR"
    RUSSIAN = "ru"
    TURKISH = "tr"
    CHINESE_SIMPLIFIED = "zh-CN"
    CHINESE_TRADITIONAL = "zh-Hant"


class KeyFormat(str, Enum):
    """Encodings for AES keys."""

    HEX = "hex"
    BASE64 = "base64"


class CosmeticType(str, Enum):
    """Cosmetic listings other than the combined "all cosmetics" listing."""

    NEW = "new"
    TRACKS = "tracks"
    CARS = "cars"
    INSTRUMENTS = "instruments"
    LEGO = "lego"
    LEGO_KITS = "legoKits"


class GameMode(str, Enum):
    """Game modes with their own news feed."""

    BATTLE_ROYALE = "br"
    SAVE_THE_WORLD = "stw"
    CREATIVE = "creative"


class MatchMethod(str, Enum):
    """How cosmetic search parameters are compared to cosmetic fields."""

    FULL = "full"
    CONTAINS = "contains"
    STARTS = "starts"
    ENDS = "ends"


class AccountType(str, Enum):
    """Account platforms for stats lookups by name."""

    EPIC = "epic"
    PSN = "psn"
    XBL = "xbl"


class TimeWindow(str, Enum):
    """Time periods covered by stats."""

    SEASON = "season"
    LIFETIME = "lifetime"


class StatsImage(str, Enum):
    """Control inputs for generated stats images."""

    ALL = "all"
    KEYBOARD_MOUSE = "keyboardMouse"
    GAMEPAD = "gamepad"
    TOUCH = "touch"
    NONE = "none"


DEFAULT_LANGUAGE = Language.ENGLISH
