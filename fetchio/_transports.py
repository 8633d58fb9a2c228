from __future__ import annotations

import logging
import typing

import httpx

from ._config import transport_options

if typing.TYPE_CHECKING:
    from ._config import Config

logger = logging.getLogger(__name__)


class Transport(typing.Protocol):
    """Anything able to perform a request described by a configuration."""

    async def perform(self, url: str, options: Config) -> httpx.Response: ...


class HTTPXTransport:
    """Transport backed by :class:`httpx.AsyncClient`.

    When ``client`` is given every request goes through it, and
    :meth:`aclose` closes it.  Otherwise a short-lived client is created
    for each request from ``client_kwargs``, for example::

        HTTPXTransport(transport=httpx.MockTransport(handler))
    """

    def __init__(
        self, client: httpx.AsyncClient | None = None, **client_kwargs: typing.Any
    ) -> None:
        if client is not None and client_kwargs:
            raise TypeError(
                "Pass either an httpx.AsyncClient or client options, not both."
            )
        self._client = client
        self._client_kwargs = client_kwargs

    async def perform(self, url: str, options: Config) -> httpx.Response:
        kwargs: dict[str, typing.Any] = {
            "method": options.get("method") or "GET",
            "url": url,
            "headers": options.get("headers") or {},
            "content": options.get("body"),
            **transport_options(options),
        }
        logger.debug("Sending %s %s", kwargs["method"], url)

        if self._client is not None:
            return await self._client.request(**kwargs)

        async with httpx.AsyncClient(**self._client_kwargs) as client:
            return await client.request(**kwargs)

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.aclose()

    async def __aenter__(self) -> HTTPXTransport:
        return self

    async def __aexit__(self, *_args: typing.Any) -> None:
        await self.aclose()

    def __repr__(self) -> str:
        owner = "shared" if self._client is not None else "per-request"
        return f"<HTTPXTransport client={owner}>"
