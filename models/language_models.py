"""Closed sets of DeepL source and target language codes.

The enum values are the wire codes DeepL expects in ``source_lang`` / ``target_lang``. Tokens typed
by the user (ISO-style codes and English names) are mapped to members through two immutable tables.

Lookups are exact: callers strip and lowercase the token before calling ``resolve_source`` or
``resolve_target``.

Target-only regional variants (``en-gb``, ``en-us``, ``pt-br``, ``pt-pt``) are distinct members.
A bare ``en`` or ``pt`` resolves to the unqualified ``EN`` / ``PT`` member and is never widened
to a regional one.
"""

from __future__ import annotations

from enum import StrEnum
from types import MappingProxyType
from typing import Final

__all__: list[str] = [
    "SOURCE_TOKENS",
    "TARGET_TOKENS",
    "SourceLanguageCode",
    "TargetLanguageCode",
    "display_name",
    "resolve_source",
    "resolve_target",
]


class SourceLanguageCode(StrEnum):
    AR = "AR"
    BG = "BG"
    CS = "CS"
    DA = "DA"
    DE = "DE"
    EL = "EL"
    EN = "EN"
    ES = "ES"
    ET = "ET"
    FI = "FI"
    FR = "FR"
    HU = "HU"
    ID = "ID"
    IT = "IT"
    JA = "JA"
    KO = "KO"
    LT = "LT"
    LV = "LV"
    NB = "NB"
    NL = "NL"
    PL = "PL"
    PT = "PT"  # all Portuguese varieties
    RO = "RO"
    RU = "RU"
    SK = "SK"
    SL = "SL"
    SV = "SV"
    TR = "TR"
    UK = "UK"
    ZH = "ZH"

    @property
    def display_name(self) -> str:
        return _SOURCE_DISPLAY_NAMES[self]


class TargetLanguageCode(StrEnum):
    AR = "AR"
    BG = "BG"
    CS = "CS"
    DA = "DA"
    DE = "DE"
    EL = "EL"
    EN = "EN"  # unspecified variant, kept for backward compatibility
    EN_GB = "EN-GB"
    EN_US = "EN-US"
    ES = "ES"
    ET = "ET"
    FI = "FI"
    FR = "FR"
    HU = "HU"
    ID = "ID"
    IT = "IT"
    JA = "JA"
    KO = "KO"
    LT = "LT"
    LV = "LV"
    NB = "NB"
    NL = "NL"
    PL = "PL"
    PT = "PT"  # unspecified variant, kept for backward compatibility
    PT_BR = "PT-BR"
    PT_PT = "PT-PT"  # all varieties except Brazilian
    RO = "RO"
    RU = "RU"
    SK = "SK"
    SL = "SL"
    SV = "SV"
    TR = "TR"
    UK = "UK"
    ZH = "ZH"  # simplified

    @property
    def display_name(self) -> str:
        return _TARGET_DISPLAY_NAMES[self]


# Languages shared by both tables: wire code, English display name, accepted tokens.
_COMMON_LANGUAGES: Final[tuple[tuple[str, str, tuple[str, ...]], ...]] = (
    ("AR", "Arabic", ("ar", "arabic")),
    ("BG", "Bulgarian", ("bg", "bulgarian")),
    ("CS", "Czech", ("cs", "czech")),
    ("DA", "Danish", ("da", "danish")),
    ("DE", "German", ("de", "german")),
    ("EL", "Greek", ("el", "greek")),
    ("EN", "English", ("en", "english")),
    ("ES", "Spanish", ("es", "spanish")),
    ("ET", "Estonian", ("et", "estonian")),
    ("FI", "Finnish", ("fi", "finnish")),
    ("FR", "French", ("fr", "french")),
    ("HU", "Hungarian", ("hu", "hungarian")),
    ("ID", "Indonesian", ("id", "indonesian")),
    ("IT", "Italian", ("it", "italian")),
    ("JA", "Japanese", ("ja", "jp", "japanese")),
    ("KO", "Korean", ("ko", "korean")),
    ("LT", "Lithuanian", ("lt", "lithuanian")),
    ("LV", "Latvian", ("lv", "latvian")),
    ("NB", "Norwegian (Bokmål)", ("nb", "norwegian")),
    ("NL", "Dutch", ("nl", "dutch")),
    ("PL", "Polish", ("pl", "polish")),
    ("PT", "Portuguese", ("pt", "portuguese")),
    ("RO", "Romanian", ("ro", "romanian")),
    ("RU", "Russian", ("ru", "russian")),
    ("SK", "Slovak", ("sk", "slovak")),
    ("SL", "Slovenian", ("sl", "slovenian")),
    ("SV", "Swedish", ("sv", "swedish")),
    ("TR", "Turkish", ("tr", "turkish")),
    ("UK", "Ukrainian", ("uk", "ukrainian")),
    ("ZH", "Chinese", ("zh", "chinese")),
)

_TARGET_ONLY_LANGUAGES: Final[tuple[tuple[str, str, tuple[str, ...]], ...]] = (
    ("EN-GB", "English (British)", ("en-gb",)),
    ("EN-US", "English (American)", ("en-us",)),
    ("PT-BR", "Portuguese (Brazilian)", ("pt-br",)),
    ("PT-PT", "Portuguese (Other)", ("pt-pt",)),
)

_TARGET_DISPLAY_OVERRIDES: Final[dict[str, str]] = {"ZH": "Chinese (simplified)"}


SOURCE_TOKENS: Final[MappingProxyType[str, SourceLanguageCode]] = MappingProxyType(
    {token: SourceLanguageCode(code) for code, _, tokens in _COMMON_LANGUAGES for token in tokens}
)

TARGET_TOKENS: Final[MappingProxyType[str, TargetLanguageCode]] = MappingProxyType(
    {
        token: TargetLanguageCode(code)
        for code, _, tokens in _COMMON_LANGUAGES + _TARGET_ONLY_LANGUAGES
        for token in tokens
    }
)

_SOURCE_DISPLAY_NAMES: Final[MappingProxyType[SourceLanguageCode, str]] = MappingProxyType(
    {SourceLanguageCode(code): name for code, name, _ in _COMMON_LANGUAGES}
)

_TARGET_DISPLAY_NAMES: Final[MappingProxyType[TargetLanguageCode, str]] = MappingProxyType(
    {
        TargetLanguageCode(code): _TARGET_DISPLAY_OVERRIDES.get(code, name)
        for code, name, _ in _COMMON_LANGUAGES + _TARGET_ONLY_LANGUAGES
    }
)


def resolve_source(token: str) -> SourceLanguageCode | None:
    """Look up a source language by its lowercase token, e.g. ``"de"`` or ``"german"``."""
    return SOURCE_TOKENS.get(token)


def resolve_target(token: str) -> TargetLanguageCode | None:
    """Look up a target language by its lowercase token, including ``"en-gb"`` style variants."""
    return TARGET_TOKENS.get(token)


def display_name(code: SourceLanguageCode | TargetLanguageCode) -> str:
    """Human-readable English name of a language code, e.g. ``EN-GB`` -> ``"English (British)"``."""
    if isinstance(code, TargetLanguageCode):
        return _TARGET_DISPLAY_NAMES[code]
    return _SOURCE_DISPLAY_NAMES[code]
