"""Parser for the translation query syntax.

Accepted forms (whitespace around every part is ignored, codes are case-insensitive)::

    <target>: <text>
    <source> -> <target>: <text>

The first colon separates the language designation from the text; any further colons belong to
the text. Language tokens may be short codes (``de``), English names (``german``) or, for targets,
regional variants (``en-gb``).

Examples:
    "de: Hello"            -> target DE, source detected by DeepL
    "english->ja: Hello"   -> source EN, target JA
    "fr: 10:30 is fine"    -> text "10:30 is fine"
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from core.trans.interface import ParseFailure, ParseFailureReason
from models.language_models import resolve_source, resolve_target
from models.translation_models import TranslationRequest
from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging

    from models.language_models import SourceLanguageCode, TargetLanguageCode

__all__: list[str] = ["QueryParser"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)

BODY_SEPARATOR: Final[str] = ":"
LANGUAGE_ARROW: Final[str] = "->"


class QueryParser:
    """Turns a raw query into a ``TranslationRequest`` or a ``ParseFailure``."""

    @classmethod
    def parse(cls, raw_query: str) -> TranslationRequest | ParseFailure:
        """Parse a raw query string.

        Args:
            raw_query (str): Query as typed by the user.

        Returns:
            TranslationRequest | ParseFailure: The request, or the reason the query was rejected.
        """
        code_spec, separator, rest = raw_query.partition(BODY_SEPARATOR)
        if not separator:
            return ParseFailure(ParseFailureReason.NO_QUERY_BODY)

        code_spec = code_spec.strip()
        body: str = rest.strip()
        if not code_spec:
            return ParseFailure(ParseFailureReason.NO_QUERY_BODY)
        if not body:
            return ParseFailure(ParseFailureReason.EMPTY_BODY, code_spec)

        segments: list[str] = code_spec.split(LANGUAGE_ARROW)
        logger.debug("'code_spec': '%s', 'segments': %s", code_spec, segments)

        match segments:
            case [target_token]:
                return cls._build_request(body, target_token, None)
            case [source_token, target_token]:
                return cls._build_request(body, target_token, source_token)
            case []:
                return ParseFailure(ParseFailureReason.NO_TARGET_CODE)
            case _:
                return ParseFailure(ParseFailureReason.TOO_MANY_ARROWS, code_spec)

    @staticmethod
    def _build_request(body: str, target_token: str, source_token: str | None) -> TranslationRequest | ParseFailure:
        source: SourceLanguageCode | None = None
        if source_token is not None:
            normalized_source: str = source_token.strip().lower()
            source = resolve_source(normalized_source)
            if source is None:
                return ParseFailure(ParseFailureReason.INVALID_SOURCE_CODE, normalized_source)

        normalized_target: str = target_token.strip().lower()
        target: TargetLanguageCode | None = resolve_target(normalized_target)
        if target is None:
            return ParseFailure(ParseFailureReason.INVALID_TARGET_CODE, normalized_target)

        return TranslationRequest(text=(body,), target=target, source=source)
