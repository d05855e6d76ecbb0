"""Models for translation requests, DeepL responses and presented results.

``TranslatedItem`` and ``TranslationResponse`` are decoded from the DeepL JSON reply with
dataclasses-json. The marshmallow schema is used rather than ``from_dict`` so that missing keys and
wrongly typed values are rejected instead of silently passed through.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from dataclasses_json import DataClassJsonMixin, config, dataclass_json
from marshmallow import EXCLUDE, fields

from models.language_models import SourceLanguageCode, TargetLanguageCode

__all__: list[str] = [
    "CharacterQuota",
    "PresentedResult",
    "TranslatedItem",
    "TranslationRequest",
    "TranslationResponse",
]


@dataclass(frozen=True)
class TranslationRequest:
    """A single translation request built from a parsed query.

    Attributes:
        text (tuple[str, ...]): Texts to translate. Always exactly one in this application.
        target (TargetLanguageCode): Language to translate into.
        source (SourceLanguageCode | None): Language of the text. None lets DeepL detect it.
    """

    text: tuple[str, ...]
    target: TargetLanguageCode
    source: SourceLanguageCode | None = None

    def __post_init__(self) -> None:
        if not self.text:
            msg = "A translation request needs at least one text"
            raise ValueError(msg)
        if any(not item for item in self.text):
            msg = "A translation request cannot contain an empty text"
            raise ValueError(msg)

    @property
    def body(self) -> str:
        return self.text[0]

    def to_payload(self) -> dict[str, Any]:
        """JSON body for ``POST /v2/translate``; ``source_lang`` is omitted when unset."""
        payload: dict[str, Any] = {"text": list(self.text), "target_lang": self.target.value}
        if self.source is not None:
            payload["source_lang"] = self.source.value
        return payload


@dataclass_json
@dataclass
class TranslatedItem(DataClassJsonMixin):
    """One entry of the ``translations`` array.

    Attributes:
        detected_source_language (SourceLanguageCode): Source language reported by DeepL.
        text (str): Translated text.
    """

    detected_source_language: SourceLanguageCode = field(
        metadata=config(decoder=SourceLanguageCode, mm_field=fields.Str(required=True))
    )
    text: str = field(metadata=config(mm_field=fields.Str(required=True)))


@dataclass_json
@dataclass
class TranslationResponse(DataClassJsonMixin):
    """Decoded body of a ``POST /v2/translate`` reply."""

    translations: list[TranslatedItem] = field(
        metadata=config(
            mm_field=fields.List(fields.Nested(TranslatedItem.schema(unknown=EXCLUDE)), required=True),
        )
    )

    @classmethod
    def decode(cls, payload: Any) -> TranslationResponse:
        """Validate and decode a JSON payload.

        Raises:
            marshmallow.ValidationError: If keys are missing or values have the wrong type.
            ValueError: If the detected source language is not a known source code.
        """
        return cls.schema(unknown=EXCLUDE).load(payload)


@dataclass(frozen=True)
class PresentedResult:
    """A search result handed back to the host.

    Attributes:
        display_text (str): Primary label shown to the user.
        clipboard_text (str): Payload copied when the result is executed. Empty for error results.
        context (str): Secondary text; only used by error results.
    """

    display_text: str
    clipboard_text: str
    context: str = ""


@dataclass
class CharacterQuota:
    """Character usage of the DeepL account in the current billing period.

    Attributes:
        count (int): Characters translated so far.
        limit (int): Characters allowed.
    """

    count: int = 0
    limit: int = 0

    @property
    def limit_reached(self) -> bool:
        return self.limit > 0 and self.count >= self.limit
