from __future__ import annotations

import logging
from typing import Any

import pytest

from core.plugin import NAME, DeepLSearch
from core.trans.client import DeeplClient
from core.trans.interface import ClientFailure, ClientFailureReason
from models.config_models import Config
from models.language_models import SourceLanguageCode, TargetLanguageCode
from models.translation_models import PresentedResult, TranslatedItem, TranslationRequest, TranslationResponse
from utils.logger_utils import TRACE


class DummyClient(DeeplClient):
    """Returns a canned result and records the calls instead of contacting DeepL."""

    def __init__(self, result: TranslationResponse | ClientFailure | None = None) -> None:
        super().__init__()
        self.result: TranslationResponse | ClientFailure = result or TranslationResponse(
            translations=[TranslatedItem(detected_source_language=SourceLanguageCode.EN, text="Hallo")]
        )
        self.calls: list[tuple[TranslationRequest, str, bool]] = []

    async def translate(
        self, request: TranslationRequest, api_key: str, *, use_free_tier: bool = True
    ) -> TranslationResponse | ClientFailure:
        self.calls.append((request, api_key, use_free_tier))
        return self.result


def make_search(
    *, api_key: str = "key", return_errors: bool = False, client: DummyClient | None = None
) -> tuple[DeepLSearch, DummyClient, list[str]]:
    config = Config()
    config.DEEPL.API_KEY = api_key
    config.GENERAL.RETURN_ERROR_MESSAGES = return_errors
    dummy: DummyClient = client or DummyClient()
    copied: list[str] = []

    def fake_copy(text: str) -> bool:
        copied.append(text)
        return True

    return DeepLSearch(config=config, client=dummy, copy_to_clipboard=fake_copy), dummy, copied


def test_identity() -> None:
    search, _, _ = make_search()

    assert search.name == NAME == "DeepL-Translate"
    assert search.plugin_id == NAME
    assert DeepLSearch.colored_name() == ("DeepL", 0x2292A4FF)


def test_get_config_entries_lists_host_settings() -> None:
    assert set(DeepLSearch.get_config_entries()) == {
        "DeepL Api Key",
        "Use free tier",
        "Include query in clipboard",
        "Include language code in clipboard",
        "Return Error messages",
    }


def test_search_returns_translation() -> None:
    search, client, _ = make_search()

    results: list[PresentedResult] = search.search("en->de: Hello")

    assert results == [PresentedResult(display_text="Hallo", clipboard_text="Hallo")]
    request, api_key, use_free_tier = client.calls[0]
    assert request == TranslationRequest(text=("Hello",), target=TargetLanguageCode.DE, source=SourceLanguageCode.EN)
    assert api_key == "key"
    assert use_free_tier is True


def test_search_applies_clipboard_settings() -> None:
    search, _, _ = make_search()
    search.config.CLIPBOARD.INCLUDE_QUERY = True
    search.config.CLIPBOARD.INCLUDE_LANGUAGE_CODE = True

    assert search.search("de: Hello")[0].clipboard_text == "EN: Hello\nDE: Hallo"


@pytest.mark.asyncio
async def test_search_async_inside_running_loop() -> None:
    search, client, _ = make_search()

    results: list[PresentedResult] = await search.search_async("ja: Hello")

    assert [r.display_text for r in results] == ["Hallo"]
    assert client.calls[0][0].target is TargetLanguageCode.JA


def test_missing_key_short_circuits(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="DeepLSearch")
    search, client, _ = make_search(api_key="")

    assert search.search("de: Hello") == []
    assert client.calls == []
    assert any(rec.levelno == logging.ERROR and "ConfigError" in rec.message for rec in caplog.records)


def test_missing_key_checked_before_query() -> None:
    search, client, _ = make_search(api_key="", return_errors=True)

    results: list[PresentedResult] = search.search("not a query")

    assert [r.display_text for r in results] == ["No API key"]
    assert client.calls == []


@pytest.mark.parametrize(
    ("query", "level"),
    [
        ("Hello", TRACE),
        ("de:   ", TRACE),
        ("a->b->c: Hello", logging.WARNING),
        ("xx: Hello", logging.WARNING),
        ("xx->de: Hello", logging.WARNING),
    ],
)
def test_parse_failures_are_logged_and_hidden(caplog: pytest.LogCaptureFixture, query: str, level: int) -> None:
    caplog.set_level(TRACE, logger="DeepLSearch")
    search, client, _ = make_search()

    assert search.search(query) == []
    assert client.calls == []
    assert [rec.levelno for rec in caplog.records if "ParseError" in rec.message] == [level]


def test_client_failure_is_logged_and_hidden(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="DeepLSearch")
    failure = ClientFailure(ClientFailureReason.NETWORK_FAILURE, "Unable to reach the server")
    search, _, _ = make_search(client=DummyClient(failure))

    assert search.search("de: Hello") == []
    assert any(
        rec.levelno == logging.ERROR and "TransportError" in rec.message and "Unable to reach" in rec.message
        for rec in caplog.records
    )


@pytest.mark.parametrize(
    ("query", "failure", "title"),
    [
        ("Hello", None, "No query"),
        ("a->b->c: Hello", None, "Invalid query"),
        ("de: Hello", ClientFailure(ClientFailureReason.NETWORK_FAILURE), "Request failed"),
        ("de: Hello", ClientFailure(ClientFailureReason.DECODE_FAILURE), "Response failed"),
    ],
)
def test_error_results_when_enabled(query: str, failure: ClientFailure | None, title: str) -> None:
    search, _, copied = make_search(return_errors=True, client=DummyClient(failure))

    results: list[PresentedResult] = search.search(query)

    assert len(results) == 1
    assert results[0].display_text == title
    assert results[0].clipboard_text == ""
    assert results[0].context

    search.execute(results[0])
    assert copied == []


def test_execute_copies_clipboard_payload() -> None:
    search, _, copied = make_search()

    search.execute(PresentedResult(display_text="Hallo", clipboard_text="DE: Hallo"))

    assert copied == ["DE: Hallo"]


def test_lazy_load_config_replaces_settings() -> None:
    search = DeepLSearch()
    entries: dict[str, Any] = {
        "DeepL Api Key": "host-key",
        "Use free tier": False,
        "Include query in clipboard": True,
        "Include language code in clipboard": True,
        "Return Error messages": True,
    }

    search.lazy_load_config(entries)

    assert search.config.DEEPL.API_KEY == "host-key"
    assert search.config.DEEPL.USE_FREE_TIER is False
    assert search.config.CLIPBOARD.INCLUDE_QUERY is True
    assert search.config.GENERAL.RETURN_ERROR_MESSAGES is True
    assert isinstance(search.client, DeeplClient)


def test_lazy_load_config_keeps_injected_client() -> None:
    search, client, _ = make_search()

    search.lazy_load_config({"DeepL Api Key": "other"})

    assert search.client is client
    assert search.config.DEEPL.API_KEY == "other"


def test_lazy_load_config_ignores_invalid_settings(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="DeepLSearch")
    search, _, _ = make_search(api_key="old")

    search.lazy_load_config({"Use free tier": "perhaps"})

    assert search.config.DEEPL.API_KEY == "old"
    assert any(rec.levelno == logging.ERROR for rec in caplog.records)
