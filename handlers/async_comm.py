"""Asynchronous HTTP helper used by the DeepL client.

``AsyncHttp`` wraps a single ``aiohttp.ClientSession`` and decodes responses according to their
``Content-Type``. Every failure on the wire (connection refused, reset, timeout, 4xx/5xx status)
is re-raised as ``AsyncCommError`` so that callers only have one exception family to convert.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any, Final, Literal, Self

import aiohttp
from aiohttp.client import ClientSession

from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging
    from collections.abc import Callable

    from aiohttp.client import ClientResponse


__all__: list[str] = ["AsyncCommError", "AsyncCommInvalidContentTypeError", "AsyncCommTimeoutError", "AsyncHttp"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)

HTTPMethod = Literal["GET", "POST"]

CONNECT_TIMEOUT: Final[float] = 1.0


class AsyncHttp:
    """Asynchronous HTTP client bound to one aiohttp session.

    Use it as an async context manager; the session is opened on entry and closed on exit::

        async with AsyncHttp() as http:
            data = await http.post(url=url, headers=headers, data=payload)
    """

    def __init__(self) -> None:
        self.__session: ClientSession | None = None
        self.content_handlers: dict[str, Callable[[bytes], Any]] = {}

        self.add_handler("text/plain", lambda x: x.decode("utf-8"))
        self.add_handler("application/json", lambda x: json.loads(x.decode("utf-8")))

    async def __aenter__(self) -> Self:
        self.initialize_session()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        _ = exc_type, exc_val, exc_tb
        await self.close()

    def initialize_session(self) -> None:
        """Open a new session unless one is already open.

        Must be called from inside a running event loop.
        """
        if self.__session is None or self.__session.closed:
            self.__session = ClientSession()
            logger.debug("%s session initialized", self.__class__.__name__)

    @property
    def session(self) -> ClientSession:
        if self.__session is None or self.__session.closed:
            msg = "Session is not initialized or has been closed"
            raise RuntimeError(msg)
        return self.__session

    async def close(self) -> None:
        if self.__session and not self.__session.closed:
            await self.__session.close()
            logger.debug("%s session closed", self.__class__.__name__)
        self.__session = None

    async def get(
        self,
        *,
        url: str,
        headers: dict[str, str] | None = None,
        total_timeout: float = 0.0,
    ) -> Any:
        """Send a GET request and return the decoded body."""
        logger.debug("'url': '%s', 'timeout': '%s'", url, total_timeout)
        return await self._request("GET", url=url, headers=headers, total_timeout=total_timeout)

    async def post(
        self,
        *,
        url: str,
        headers: dict[str, str] | None = None,
        data: Any | None = None,
        total_timeout: float = 0.0,
    ) -> Any:
        """Send ``data`` as a JSON body and return the decoded response.

        Args:
            url (str): Request URL.
            headers (dict[str, str] | None): Extra request headers.
            data (Any | None): JSON-serialisable request body.
            total_timeout (float): Total timeout in seconds. Zero or negative disables the timeout.

        Returns:
            Any: The decoded body; ``None`` for an empty body.
        """
        logger.debug("'url': '%s', 'data': '%s', 'timeout': '%s'", url, data, total_timeout)
        return await self._request("POST", url=url, headers=headers, json=data, total_timeout=total_timeout)

    async def decode_response(self, resp: ClientResponse) -> Any:
        """Decode the body with the handler registered for its Content-Type.

        Raises:
            AsyncCommInvalidContentTypeError: If no handler is registered for the Content-Type.
        """
        content_type: str = resp.headers.get("Content-Type", "").split(";")[0].strip()
        logger.debug("'Content-Type': '%s'", content_type)

        raw: bytes = await resp.read()
        if not raw:
            logger.debug("Received empty response")
            return None

        handler: Callable[[bytes], Any] | None = self.content_handlers.get(content_type)
        if handler:
            return handler(raw)

        msg: str = f"Unknown Content-Type '{content_type}'"
        raise AsyncCommInvalidContentTypeError(msg)

    def add_handler(self, content_type: str, handler: Callable[[bytes], Any]) -> None:
        if content_type in self.content_handlers:
            logger.warning("Handler for content type '%s' already exists, replacing it", content_type)
        self.content_handlers[content_type] = handler

    @staticmethod
    def _build_timeout(total_timeout: float) -> aiohttp.ClientTimeout:
        if total_timeout <= 0:
            return aiohttp.ClientTimeout(total=None)
        if total_timeout < CONNECT_TIMEOUT:
            return aiohttp.ClientTimeout(total=total_timeout)
        return aiohttp.ClientTimeout(connect=CONNECT_TIMEOUT, total=total_timeout)

    async def _request(
        self,
        method: HTTPMethod,
        *,
        url: str,
        total_timeout: float,
        **kwargs: Any,
    ) -> Any:
        try:
            async with self.session.request(
                method=method,
                url=url,
                timeout=self._build_timeout(total_timeout),
                **kwargs,
            ) as resp:
                resp.raise_for_status()
                return await self.decode_response(resp)

        except TimeoutError as err:
            logger.debug(err)
            msg = "Timeout due to a lack of response from the server."
            raise AsyncCommTimeoutError(msg) from err
        except ConnectionResetError as err:
            logger.debug(err)
            msg = "The connection to the server has been disconnected."
            raise AsyncCommError(msg) from err
        except aiohttp.ClientResponseError as err:
            logger.debug(err)
            msg = "Error response from the server."
            raise AsyncCommError(msg, response=err) from err
        except aiohttp.ClientError as err:
            logger.debug(err)
            msg = f"Unable to reach the server: {err}"
            raise AsyncCommError(msg) from err


class AsyncCommError(Exception):
    """A request could not be completed.

    When raised for an error status the status code is appended to the message.
    """

    def __init__(self, msg: str | BaseException, **kwargs: Any) -> None:
        self.msg: str = str(msg)
        self.status: int | None = None

        rsp: aiohttp.ClientResponseError | None = kwargs.pop("response", None)
        if isinstance(rsp, aiohttp.ClientResponseError):
            self.status = rsp.status
            self.msg = f"{self.msg}: status='{rsp.status}'"

        super().__init__(self.msg)


class AsyncCommTimeoutError(AsyncCommError):
    """The server did not answer within the configured timeout."""


class AsyncCommInvalidContentTypeError(AsyncCommError):
    """The response carried a Content-Type with no registered handler."""
