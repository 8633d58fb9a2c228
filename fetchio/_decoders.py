from __future__ import annotations

import logging
import typing

from ._models import Blob

if typing.TYPE_CHECKING:
    import httpx

logger = logging.getLogger(__name__)

ResponseKind = typing.Literal["json", "text", "bytes", "blob", "void"]

RESPONSE_KINDS: tuple[ResponseKind, ...] = ("json", "text", "bytes", "blob", "void")


def is_ok(response: httpx.Response) -> bool:
    return 200 <= response.status_code < 400


async def decode_response(response: httpx.Response, kind: ResponseKind) -> typing.Any:
    """Read ``response`` in the representation named by ``kind``.

    The body is drained once (``void`` skips reading entirely) and the
    response is closed afterwards.  Decode errors, such as malformed JSON,
    propagate to the caller.
    """
    if kind not in RESPONSE_KINDS:
        raise ValueError(
            f"Unknown response kind {kind!r}, expected one of {RESPONSE_KINDS}"
        )

    logger.debug("Decoding %s response as %s", response.status_code, kind)
    try:
        if kind == "void":
            return None

        content = await response.aread()
        if kind == "json":
            return response.json()
        if kind == "text":
            return response.text
        if kind == "bytes":
            return content
        return Blob(content, response.headers.get("content-type", ""))
    finally:
        await response.aclose()
