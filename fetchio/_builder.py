from __future__ import annotations

import inspect
import logging
import typing

from ._config import merge_config
from ._decoders import decode_response, is_ok
from ._exceptions import InvalidInterceptorResult
from ._models import FetchResult
from ._transports import HTTPXTransport
from ._urls import compose_url

if typing.TYPE_CHECKING:
    import httpx

    from ._config import Config
    from ._decoders import ResponseKind

logger = logging.getLogger(__name__)


class RequestBuilder:
    """A single pending request.

    Configuration methods (:meth:`param`, :meth:`params`, :meth:`header`,
    :meth:`headers`, :meth:`path`) mutate the builder and return it so calls
    can be chained.  Terminal methods (:meth:`json`, :meth:`string`,
    :meth:`bytes`, :meth:`blob`, :meth:`void`) send the request and decode
    the response into a :class:`~fetchio.FetchResult`::

        result = await client.get("/users").param("page", "2").json()
        if result.success:
            print(result.data)

    Terminal methods do not consume the builder: awaiting a second one
    sends the request again.
    """

    def __init__(self, url: str, config: Config) -> None:
        self._url = url
        self._query_params: dict[str, typing.Any] = {}
        self._config = config

    @property
    def url(self) -> str:
        """The URL with every appended segment, without query string."""
        return self._url

    @property
    def query_params(self) -> dict[str, typing.Any]:
        return dict(self._query_params)

    @property
    def config(self) -> Config:
        return self._config

    def build_url(self) -> str:
        return compose_url(
            self._url,
            self._query_params,
            encode=bool(self._config.get("encode_params")),
        )

    # Configuration ---------------------------------------------------------

    def param(self, key: str, value: typing.Any) -> RequestBuilder:
        self._query_params[key] = value
        return self

    def params(self, params: typing.Mapping[str, typing.Any]) -> RequestBuilder:
        self._query_params.update(params)
        return self

    def header(self, key: str, value: str) -> RequestBuilder:
        self._config = merge_config(self._config, {"headers": {key: value}})
        return self

    def headers(self, headers: typing.Mapping[str, str]) -> RequestBuilder:
        self._config = merge_config(self._config, {"headers": dict(headers)})
        return self

    def path(self, segment: str) -> RequestBuilder:
        self._url = self._url + segment
        return self

    # Terminal --------------------------------------------------------------

    async def json(self) -> FetchResult:
        return await self._fetch("json")

    async def string(self) -> FetchResult:
        return await self._fetch("text")

    async def bytes(self) -> FetchResult:
        return await self._fetch("bytes")

    async def blob(self) -> FetchResult:
        return await self._fetch("blob")

    async def void(self) -> FetchResult:
        return await self._fetch("void")

    async def fetch(self, kind: ResponseKind = "json") -> FetchResult:
        """Send the request and decode the response as ``kind``."""
        return await self._fetch(kind)

    async def _send(self) -> httpx.Response:
        url = self.build_url()
        options = self._config

        interceptor = options.get("request_interceptor")
        if interceptor is not None:
            logger.debug("Running request interceptor for %s", url)
            result = interceptor(url, options)
            if inspect.isawaitable(result):
                result = await result
            if not isinstance(result, (tuple, list)) or len(result) != 2:
                raise InvalidInterceptorResult(result)
            url, options = result

        transport = options.get("transport") or HTTPXTransport()
        return await transport.perform(url, options)

    async def _fetch(self, kind: ResponseKind) -> FetchResult:
        response = await self._send()
        logger.debug("Received status %s", response.status_code)

        interceptor = self._config.get("response_interceptor")
        if interceptor is not None:
            result = interceptor(response)
            if inspect.isawaitable(result):
                result = await result
            return typing.cast(FetchResult, result)

        data = await decode_response(response, kind)
        return FetchResult(is_ok(response), data)

    def __repr__(self) -> str:
        method = self._config.get("method", "GET")
        return f"<RequestBuilder [{method} {self.build_url()!r}]>"
