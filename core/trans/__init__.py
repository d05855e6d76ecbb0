"""Translation pipeline.

Raw query -> ``QueryParser`` -> ``TranslationRequest`` -> ``DeeplClient`` -> ``TranslationResponse``
-> ``ResultFormatter`` -> ``PresentedResult`` list. Each stage returns a failure value instead of
raising when the query cannot be completed.
"""

from core.trans.client import FREE_API_HOST, PAID_API_HOST, DeeplClient
from core.trans.formatter import ResultFormatter
from core.trans.interface import (
    ClientFailure,
    ClientFailureReason,
    ErrorCategory,
    ParseFailure,
    ParseFailureReason,
)
from core.trans.query_parser import QueryParser

__all__: list[str] = [
    "FREE_API_HOST",
    "PAID_API_HOST",
    "ClientFailure",
    "ClientFailureReason",
    "DeeplClient",
    "ErrorCategory",
    "ParseFailure",
    "ParseFailureReason",
    "QueryParser",
    "ResultFormatter",
]
