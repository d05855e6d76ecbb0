"""Client for the DeepL REST API (``/v2/translate`` and ``/v2/usage``).

Each call opens its own ``AsyncHttp`` session, so a ``DeeplClient`` instance carries no mutable
state and can be shared. Nothing is retried: every failure is returned as a ``ClientFailure``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Final

from marshmallow import ValidationError

from core.trans.interface import ClientFailure, ClientFailureReason
from handlers.async_comm import AsyncCommError, AsyncCommInvalidContentTypeError, AsyncHttp
from models.translation_models import CharacterQuota, TranslationResponse
from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging

    from models.translation_models import TranslationRequest

__all__: list[str] = ["FREE_API_HOST", "PAID_API_HOST", "DeeplClient"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)

FREE_API_HOST: Final[str] = "https://api-free.deepl.com"
PAID_API_HOST: Final[str] = "https://api.deepl.com"
TRANSLATE_PATH: Final[str] = "/v2/translate"
USAGE_PATH: Final[str] = "/v2/usage"


class DeeplClient:
    """Issues DeepL API calls.

    Args:
        timeout (float): Total timeout per request in seconds. Zero disables the timeout.
    """

    def __init__(self, timeout: float = 0.0) -> None:
        self.timeout: float = timeout

    @staticmethod
    def endpoint(path: str, *, use_free_tier: bool) -> str:
        return (FREE_API_HOST if use_free_tier else PAID_API_HOST) + path

    @staticmethod
    def build_headers(api_key: str) -> dict[str, str]:
        return {"Authorization": f"DeepL-Auth-Key {api_key}"}

    async def translate(
        self, request: TranslationRequest, api_key: str, *, use_free_tier: bool = True
    ) -> TranslationResponse | ClientFailure:
        """Send a translation request.

        Args:
            request (TranslationRequest): Request built by the query parser.
            api_key (str): DeepL authentication key. Empty keys fail before any network activity.
            use_free_tier (bool): Use the free API host instead of the paid one.

        Returns:
            TranslationResponse | ClientFailure: The decoded response or the reason the call failed.
        """
        if not api_key:
            return ClientFailure(ClientFailureReason.MISSING_API_KEY)

        url: str = self.endpoint(TRANSLATE_PATH, use_free_tier=use_free_tier)
        payload_or_failure: Any | ClientFailure = await self._call(
            "POST", url=url, api_key=api_key, data=request.to_payload()
        )
        if isinstance(payload_or_failure, ClientFailure):
            return payload_or_failure

        try:
            response: TranslationResponse = TranslationResponse.decode(payload_or_failure)
        except ValidationError as err:
            return ClientFailure(ClientFailureReason.DECODE_FAILURE, f"unexpected response layout: {err.messages}")
        except (ValueError, TypeError, KeyError) as err:
            return ClientFailure(ClientFailureReason.DECODE_FAILURE, str(err))

        logger.info("translation completed (%s > %s)", request.source or "auto", request.target)
        return response

    async def get_usage(self, api_key: str, *, use_free_tier: bool = True) -> CharacterQuota | ClientFailure:
        """Fetch the character usage of the account behind ``api_key``."""
        if not api_key:
            return ClientFailure(ClientFailureReason.MISSING_API_KEY)

        url: str = self.endpoint(USAGE_PATH, use_free_tier=use_free_tier)
        payload_or_failure: Any | ClientFailure = await self._call("GET", url=url, api_key=api_key)
        if isinstance(payload_or_failure, ClientFailure):
            return payload_or_failure

        try:
            return CharacterQuota(
                count=int(payload_or_failure["character_count"]),
                limit=int(payload_or_failure["character_limit"]),
            )
        except (KeyError, TypeError, ValueError) as err:
            return ClientFailure(ClientFailureReason.DECODE_FAILURE, f"unexpected usage layout: {err!r}")

    async def _call(
        self, method: str, *, url: str, api_key: str, data: dict[str, Any] | None = None
    ) -> Any | ClientFailure:
        headers: dict[str, str] = self.build_headers(api_key)
        try:
            async with AsyncHttp() as http:
                if method == "POST":
                    return await http.post(url=url, headers=headers, data=data, total_timeout=self.timeout)
                return await http.get(url=url, headers=headers, total_timeout=self.timeout)
        except AsyncCommInvalidContentTypeError as err:
            return ClientFailure(ClientFailureReason.DECODE_FAILURE, str(err))
        except AsyncCommError as err:
            return ClientFailure(ClientFailureReason.NETWORK_FAILURE, str(err))
        except ValueError as err:
            # the JSON body handler failed
            return ClientFailure(ClientFailureReason.DECODE_FAILURE, str(err))
