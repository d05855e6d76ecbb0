"""Data models for DeepL Search.

This package contains the configuration dataclasses, the closed DeepL language code tables,
and the request/response/result models of the translation pipeline.
"""

from __future__ import annotations

from models.config_models import HOST_ENTRIES, Config
from models.language_models import (
    SourceLanguageCode,
    TargetLanguageCode,
    display_name,
    resolve_source,
    resolve_target,
)
from models.translation_models import (
    CharacterQuota,
    PresentedResult,
    TranslatedItem,
    TranslationRequest,
    TranslationResponse,
)

__all__: list[str] = [
    "HOST_ENTRIES",
    "CharacterQuota",
    "Config",
    "PresentedResult",
    "SourceLanguageCode",
    "TargetLanguageCode",
    "TranslatedItem",
    "TranslationRequest",
    "TranslationResponse",
    "display_name",
    "resolve_source",
    "resolve_target",
]
