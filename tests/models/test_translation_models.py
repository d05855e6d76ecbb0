from __future__ import annotations

import pytest
from marshmallow import ValidationError

from models.language_models import SourceLanguageCode, TargetLanguageCode
from models.translation_models import CharacterQuota, TranslationRequest, TranslationResponse


def test_payload_omits_source_when_absent() -> None:
    request = TranslationRequest(text=("Hello, world!",), target=TargetLanguageCode.DE)

    assert request.to_payload() == {"text": ["Hello, world!"], "target_lang": "DE"}


def test_payload_includes_source_and_regional_target() -> None:
    request = TranslationRequest(text=("Olá",), target=TargetLanguageCode.EN_GB, source=SourceLanguageCode.PT)

    assert request.to_payload() == {"text": ["Olá"], "target_lang": "EN-GB", "source_lang": "PT"}


@pytest.mark.parametrize("text", [(), ("",), ("a", "")])
def test_request_rejects_empty_text(text: tuple[str, ...]) -> None:
    with pytest.raises(ValueError, match="text"):
        TranslationRequest(text=text, target=TargetLanguageCode.DE)


def test_decode_response() -> None:
    response = TranslationResponse.decode(
        {
            "translations": [
                {"detected_source_language": "EN", "text": "Hallo, Welt!"},
                {"detected_source_language": "JA", "text": "Guten Morgen"},
            ]
        }
    )

    assert [item.text for item in response.translations] == ["Hallo, Welt!", "Guten Morgen"]
    assert response.translations[0].detected_source_language is SourceLanguageCode.EN
    assert response.translations[1].detected_source_language is SourceLanguageCode.JA


def test_decode_ignores_extra_fields() -> None:
    response = TranslationResponse.decode(
        {
            "translations": [{"detected_source_language": "EN", "text": "Hallo", "billed_characters": 5}],
            "usage": {"character_count": 5},
        }
    )

    assert response.translations[0].text == "Hallo"


def test_decode_empty_translation_list() -> None:
    assert TranslationResponse.decode({"translations": []}).translations == []


@pytest.mark.parametrize(
    "payload",
    [
        {},
        {"translations": None},
        {"translations": [{"text": "Hallo"}]},
        {"translations": [{"detected_source_language": "EN"}]},
        {"translations": [{"detected_source_language": "EN", "text": 5}]},
        ["not", "an", "object"],
    ],
)
def test_decode_rejects_schema_mismatch(payload: object) -> None:
    with pytest.raises(ValidationError):
        TranslationResponse.decode(payload)


def test_decode_rejects_unknown_detected_language() -> None:
    with pytest.raises(ValueError, match="XX"):
        TranslationResponse.decode({"translations": [{"detected_source_language": "XX", "text": "Hallo"}]})


def test_character_quota_limit_reached() -> None:
    assert CharacterQuota(count=500, limit=500).limit_reached is True
    assert CharacterQuota(count=10, limit=500).limit_reached is False
    assert CharacterQuota().limit_reached is False
