"""Core of DeepL Search.

This package contains the search host integration and the translation pipeline
(query parsing, the DeepL client and result formatting).
"""

from core.plugin import NAME, DeepLSearch
from core.version import VERSION

__all__: list[str] = [
    "NAME",
    "VERSION",
    "DeepLSearch",
]
