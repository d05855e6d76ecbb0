"""Builds presented results and their clipboard payloads.

With both options enabled the clipboard holds::

    EN: Hello
    DE: Hallo

The source code on the first line is the one given in the query, or the language DeepL detected
when the query did not name one.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from models.translation_models import PresentedResult

if TYPE_CHECKING:
    from models.language_models import SourceLanguageCode
    from models.translation_models import TranslatedItem, TranslationRequest, TranslationResponse

__all__: list[str] = ["ResultFormatter"]


class ResultFormatter:
    @classmethod
    def format(
        cls,
        request: TranslationRequest,
        response: TranslationResponse,
        *,
        include_query: bool = False,
        include_codes: bool = False,
    ) -> list[PresentedResult]:
        """Create one result per translation, in response order.

        Args:
            request (TranslationRequest): The request that was sent.
            response (TranslationResponse): The decoded reply.
            include_query (bool): Put the original text on a line above the translation.
            include_codes (bool): Prefix each clipboard line with its language code.

        Returns:
            list[PresentedResult]: Results whose label is the unmodified translated text.
        """
        return [
            PresentedResult(
                display_text=item.text,
                clipboard_text=cls.clipboard_text(
                    request, item, include_query=include_query, include_codes=include_codes
                ),
            )
            for item in response.translations
        ]

    @staticmethod
    def clipboard_text(
        request: TranslationRequest, item: TranslatedItem, *, include_query: bool, include_codes: bool
    ) -> str:
        query_line: str = ""
        if include_query:
            if include_codes:
                source: SourceLanguageCode = request.source or item.detected_source_language
                query_line = f"{source.value}: {request.body}\n"
            else:
                query_line = f"{request.body}\n"

        translated_line: str = f"{request.target.value}: {item.text}" if include_codes else item.text
        return query_line + translated_line
