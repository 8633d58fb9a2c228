"""
Errors raised by fetchio itself.

Anything else that can go wrong during a request is propagated unchanged:

* transport failures surface as ``httpx.HTTPError`` subclasses
  (``httpx.ConnectError``, ``httpx.ReadTimeout`` …),
* decode failures surface as ``json.JSONDecodeError`` / ``UnicodeDecodeError``,
* exceptions raised inside interceptors reach the awaiting caller as-is.

An unsuccessful HTTP status is never an exception: it is reported through
``FetchResult.success``.
"""

from __future__ import annotations

import typing


class FetchioError(Exception):
    """Base class for errors raised by fetchio."""


class UnsupportedPayload(FetchioError, TypeError):
    def __init__(self, payload: typing.Any) -> None:
        super().__init__(
            f"Unsupported payload type {type(payload).__name__!r}. "
            "Expected FormData, a mapping, a list, str, bytes or None."
        )
        self.payload = payload


class InvalidInterceptorResult(FetchioError, TypeError):
    def __init__(self, result: typing.Any) -> None:
        super().__init__(
            "A request interceptor must return a (url, config) pair, "
            f"got {type(result).__name__!r}."
        )
        self.result = result
