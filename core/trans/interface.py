"""Failure values returned by the query parser and the DeepL client.

Every stage of a search either produces its output or returns one of these frozen records. They are
plain values rather than exceptions: a malformed query or an unreachable server is an expected
outcome of a search and the caller only has to decide how loudly to log it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum
from typing import TypeAlias

from utils.logger_utils import TRACE

__all__: list[str] = [
    "ClientFailure",
    "ClientFailureReason",
    "ErrorCategory",
    "Failure",
    "ParseFailure",
    "ParseFailureReason",
]


class ErrorCategory(StrEnum):
    CONFIG = "ConfigError"
    PARSE = "ParseError"
    TRANSPORT = "TransportError"
    DECODE = "DecodeError"


class ParseFailureReason(StrEnum):
    NO_QUERY_BODY = "NoQueryBody"
    EMPTY_BODY = "EmptyBody"
    TOO_MANY_ARROWS = "TooManyArrows"
    NO_TARGET_CODE = "NoTargetCode"
    INVALID_SOURCE_CODE = "InvalidSourceCode"
    INVALID_TARGET_CODE = "InvalidTargetCode"


class ClientFailureReason(StrEnum):
    MISSING_API_KEY = "MissingApiKey"
    NETWORK_FAILURE = "NetworkFailure"
    DECODE_FAILURE = "DecodeFailure"


# (log level, short title, explanation) per reason.
_PARSE_REPORTS: dict[ParseFailureReason, tuple[int, str, str]] = {
    ParseFailureReason.NO_QUERY_BODY: (TRACE, "No query", "No query was provided"),
    ParseFailureReason.EMPTY_BODY: (TRACE, "No query", "No query was provided"),
    ParseFailureReason.TOO_MANY_ARROWS: (logging.WARNING, "Invalid query", "Too many arrows"),
    ParseFailureReason.NO_TARGET_CODE: (logging.WARNING, "Invalid query", "No target language code"),
    ParseFailureReason.INVALID_SOURCE_CODE: (logging.WARNING, "Invalid query", "Invalid source language code"),
    ParseFailureReason.INVALID_TARGET_CODE: (logging.WARNING, "Invalid query", "Invalid target language code"),
}

_CLIENT_REPORTS: dict[ClientFailureReason, tuple[ErrorCategory, str, str]] = {
    ClientFailureReason.MISSING_API_KEY: (ErrorCategory.CONFIG, "No API key", "No DeepL API key was provided"),
    ClientFailureReason.NETWORK_FAILURE: (ErrorCategory.TRANSPORT, "Request failed", "Failed to send request"),
    ClientFailureReason.DECODE_FAILURE: (ErrorCategory.DECODE, "Response failed", "Failed to parse response"),
}


@dataclass(frozen=True)
class ParseFailure:
    """The query could not be turned into a translation request.

    Attributes:
        reason (ParseFailureReason): Which rule of the query grammar was violated.
        detail (str): The offending fragment, if any.
    """

    reason: ParseFailureReason
    detail: str = ""

    @property
    def category(self) -> ErrorCategory:
        return ErrorCategory.PARSE

    @property
    def log_level(self) -> int:
        return _PARSE_REPORTS[self.reason][0]

    @property
    def title(self) -> str:
        return _PARSE_REPORTS[self.reason][1]

    @property
    def message(self) -> str:
        explanation: str = _PARSE_REPORTS[self.reason][2]
        return f"{explanation}: '{self.detail}'" if self.detail else explanation


@dataclass(frozen=True)
class ClientFailure:
    """The translation call did not yield a usable response.

    Attributes:
        reason (ClientFailureReason): Missing key, transport failure or undecodable response.
        detail (str): Underlying error text.
    """

    reason: ClientFailureReason
    detail: str = ""

    @property
    def category(self) -> ErrorCategory:
        return _CLIENT_REPORTS[self.reason][0]

    @property
    def log_level(self) -> int:
        return logging.ERROR

    @property
    def title(self) -> str:
        return _CLIENT_REPORTS[self.reason][1]

    @property
    def message(self) -> str:
        explanation: str = _CLIENT_REPORTS[self.reason][2]
        return f"{explanation}: {self.detail}" if self.detail else explanation


Failure: TypeAlias = ParseFailure | ClientFailure
