"""Configuration data models for DeepL Search.

Section and option names match the INI file read by ``ConfigLoader``::

    [GENERAL]
    DEBUG = False
    RETURN_ERROR_MESSAGES = False
    LOG_FILE = ""

    [DEEPL]
    API_KEY = ""
    USE_FREE_TIER = True
    TIMEOUT = 0

    [CLIPBOARD]
    INCLUDE_QUERY = False
    INCLUDE_LANGUAGE_CODE = False

Hosts that pass key/value settings instead of an INI file use the names in ``HOST_ENTRIES``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Final

__all__: list[str] = ["HOST_ENTRIES", "Clipboard", "Config", "Deepl", "General"]


@dataclass
class General:
    DEBUG: bool = False
    RETURN_ERROR_MESSAGES: bool = False
    LOG_FILE: str = ""


@dataclass
class Deepl:
    API_KEY: str = ""
    USE_FREE_TIER: bool = True
    TIMEOUT: float = 0.0  # seconds, 0 = no timeout


@dataclass
class Clipboard:
    INCLUDE_QUERY: bool = False
    INCLUDE_LANGUAGE_CODE: bool = False


@dataclass
class Config:
    GENERAL: General = field(default_factory=General)
    DEEPL: Deepl = field(default_factory=Deepl)
    CLIPBOARD: Clipboard = field(default_factory=Clipboard)


# Host setting name -> (section, option)
HOST_ENTRIES: Final[dict[str, tuple[str, str]]] = {
    "DeepL Api Key": ("DEEPL", "API_KEY"),
    "Use free tier": ("DEEPL", "USE_FREE_TIER"),
    "Include query in clipboard": ("CLIPBOARD", "INCLUDE_QUERY"),
    "Include language code in clipboard": ("CLIPBOARD", "INCLUDE_LANGUAGE_CODE"),
    "Return Error messages": ("GENERAL", "RETURN_ERROR_MESSAGES"),
}
