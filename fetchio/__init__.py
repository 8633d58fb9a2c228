# ruff: noqa: I001
from . import fs  # noqa: F401
from ._builder import RequestBuilder
from ._client import Client, create_client
from ._config import (
    TRANSPORT_OPTIONS,
    Config,
    RequestInterceptor,
    ResponseInterceptor,
    merge_config,
)
from ._decoders import ResponseKind, decode_response
from ._exceptions import FetchioError, InvalidInterceptorResult, UnsupportedPayload
from ._models import Blob, FetchResult
from ._payload import EncodedPayload, FormData, apply_payload, encode_payload
from ._transports import HTTPXTransport, Transport
from ._urls import compose_url, quote_query_value
from .fs import FileSystemAdapter, LocalFileSystem

__title__ = "fetchio"
__description__ = "A fluent, chainable HTTP client built on httpx."
__version__ = "0.3.0"

try:
    from .cli import main
except ImportError:

    def main() -> None:  # type: ignore[misc]
        import sys

        print(
            'The "fetchio" command requires the CLI extra. '
            'Install it with: pip install "fetchio[cli]"',
            file=sys.stderr,
        )
        sys.exit(1)


_EXCLUDED_FROM_ALL = {"cli", "main"}

__all__ = sorted(
    (
        member
        for member in list(vars().keys())
        if (
            not member.startswith("_")
            or member in ["__description__", "__title__", "__version__"]
        )
        and member not in _EXCLUDED_FROM_ALL
    ),
    key=str.casefold,
)
