from __future__ import annotations

import pytest

from core.trans.formatter import ResultFormatter
from models.language_models import SourceLanguageCode, TargetLanguageCode
from models.translation_models import PresentedResult, TranslatedItem, TranslationRequest, TranslationResponse


@pytest.fixture
def request_de() -> TranslationRequest:
    return TranslationRequest(text=("Hello",), target=TargetLanguageCode.DE)


@pytest.fixture
def response_en() -> TranslationResponse:
    return TranslationResponse(
        translations=[TranslatedItem(detected_source_language=SourceLanguageCode.EN, text="Hallo")]
    )


@pytest.mark.parametrize(
    ("include_query", "include_codes", "expected"),
    [
        (False, False, "Hallo"),
        (False, True, "DE: Hallo"),
        (True, False, "Hello\nHallo"),
        (True, True, "EN: Hello\nDE: Hallo"),
    ],
)
def test_clipboard_layouts(
    request_de: TranslationRequest,
    response_en: TranslationResponse,
    include_query: bool,
    include_codes: bool,
    expected: str,
) -> None:
    results: list[PresentedResult] = ResultFormatter.format(
        request_de, response_en, include_query=include_query, include_codes=include_codes
    )

    assert results == [PresentedResult(display_text="Hallo", clipboard_text=expected)]


def test_explicit_source_wins_over_detected(response_en: TranslationResponse) -> None:
    request = TranslationRequest(text=("Hello",), target=TargetLanguageCode.DE, source=SourceLanguageCode.NL)

    result: PresentedResult = ResultFormatter.format(request, response_en, include_query=True, include_codes=True)[0]

    assert result.clipboard_text == "NL: Hello\nDE: Hallo"


def test_regional_target_code_is_written_as_sent() -> None:
    request = TranslationRequest(text=("Olá",), target=TargetLanguageCode.EN_GB)
    response = TranslationResponse(
        translations=[TranslatedItem(detected_source_language=SourceLanguageCode.PT, text="Hello")]
    )

    result: PresentedResult = ResultFormatter.format(request, response, include_query=True, include_codes=True)[0]

    assert result.clipboard_text == "PT: Olá\nEN-GB: Hello"


def test_one_result_per_translation_in_order(request_de: TranslationRequest) -> None:
    response = TranslationResponse(
        translations=[
            TranslatedItem(detected_source_language=SourceLanguageCode.EN, text="Hallo"),
            TranslatedItem(detected_source_language=SourceLanguageCode.FR, text="Salut"),
        ]
    )

    results: list[PresentedResult] = ResultFormatter.format(request_de, response, include_codes=True)

    assert [r.display_text for r in results] == ["Hallo", "Salut"]
    assert [r.clipboard_text for r in results] == ["DE: Hallo", "DE: Salut"]
    assert all(r.context == "" for r in results)


def test_empty_response_gives_no_results(request_de: TranslationRequest) -> None:
    assert ResultFormatter.format(request_de, TranslationResponse(translations=[])) == []
