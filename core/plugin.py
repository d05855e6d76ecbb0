"""Search host integration for DeepL translation.

A launcher-style host creates one ``DeepLSearch``, hands it its settings through
``lazy_load_config`` and then calls ``search`` for every query the user types. Selecting a result
calls ``execute``, which copies the result's clipboard payload.

``search`` never raises for an expected failure (missing key, malformed query, network or decode
problem). The failure is logged and an empty list is returned, or a single explanatory result
when ``"Return Error messages"`` is enabled.
"""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, Any, Final

from config.loader import ConfigLoader, ConfigLoaderError, default_entries
from core.trans.client import DeeplClient
from core.trans.formatter import ResultFormatter
from core.trans.interface import ClientFailure, ClientFailureReason, ParseFailure
from core.trans.query_parser import QueryParser
from models.config_models import Config
from models.translation_models import PresentedResult, TranslationRequest, TranslationResponse
from utils.clipboard_utils import ClipboardUtils
from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging
    from collections.abc import Callable, Mapping

    from core.trans.interface import Failure

__all__: list[str] = ["NAME", "DeepLSearch"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)

NAME: Final[str] = "DeepL-Translate"
LABEL: Final[str] = "DeepL"
LABEL_COLOR: Final[int] = 0x2292A4FF  # RGBA


class DeepLSearch:
    """Translates queries such as ``"en->de: Hello"`` through DeepL.

    Args:
        plugin_id (str): Identifier assigned by the host.
        config (Config | None): Initial settings; defaults apply until ``lazy_load_config`` runs.
        client (DeeplClient | None): Client to use. By default one is built from the settings.
        copy_to_clipboard (Callable[[str], bool] | None): Clipboard writer used by ``execute``.
    """

    def __init__(
        self,
        plugin_id: str = NAME,
        *,
        config: Config | None = None,
        client: DeeplClient | None = None,
        copy_to_clipboard: Callable[[str], bool] | None = None,
    ) -> None:
        self.plugin_id: str = plugin_id
        self.config: Config = config if config is not None else Config()
        self._owns_client: bool = client is None
        self.client: DeeplClient = client if client is not None else DeeplClient(self.config.DEEPL.TIMEOUT)
        self._copy: Callable[[str], bool] = copy_to_clipboard or ClipboardUtils.copy

    @property
    def name(self) -> str:
        return NAME

    @staticmethod
    def colored_name() -> tuple[str, int]:
        return LABEL, LABEL_COLOR

    @staticmethod
    def get_config_entries() -> dict[str, str | bool]:
        return default_entries()

    def lazy_load_config(self, entries: Mapping[str, Any]) -> None:
        """Replace the current settings with host-supplied ones.

        Invalid settings are logged and the previous configuration is kept.
        """
        try:
            config: Config = ConfigLoader.from_entries(entries)
        except ConfigLoaderError as err:
            logger.error("Ignoring invalid settings: %s", err)
            return

        self.config = config
        if self._owns_client:
            self.client = DeeplClient(config.DEEPL.TIMEOUT)
        logger.debug("Settings loaded for '%s'", self.plugin_id)

    def search(self, query: str) -> list[PresentedResult]:
        """Blocking variant of ``search_async`` for hosts without an event loop."""
        return asyncio.run(self.search_async(query))

    async def search_async(self, query: str) -> list[PresentedResult]:
        """Translate ``query`` and return the presentable results.

        Args:
            query (str): Raw query, e.g. ``"de: Good morning"``.

        Returns:
            list[PresentedResult]: One result per translation, or an empty list on failure.
        """
        api_key: str = self.config.DEEPL.API_KEY
        if not api_key:
            return self._report(ClientFailure(ClientFailureReason.MISSING_API_KEY))

        parsed: TranslationRequest | ParseFailure = QueryParser.parse(query)
        if isinstance(parsed, ParseFailure):
            return self._report(parsed)

        response: TranslationResponse | ClientFailure = await self.client.translate(
            parsed, api_key, use_free_tier=self.config.DEEPL.USE_FREE_TIER
        )
        if isinstance(response, ClientFailure):
            return self._report(response)

        return ResultFormatter.format(
            parsed,
            response,
            include_query=self.config.CLIPBOARD.INCLUDE_QUERY,
            include_codes=self.config.CLIPBOARD.INCLUDE_LANGUAGE_CODE,
        )

    def execute(self, result: PresentedResult) -> None:
        """Copy the clipboard payload of the chosen result. Results without one are ignored."""
        if result.clipboard_text:
            self._copy(result.clipboard_text)

    def _report(self, failure: Failure) -> list[PresentedResult]:
        logger.log(failure.log_level, "%s: %s", failure.category, failure.message)
        if self.config.GENERAL.RETURN_ERROR_MESSAGES:
            return [PresentedResult(display_text=failure.title, clipboard_text="", context=failure.message)]
        return []
