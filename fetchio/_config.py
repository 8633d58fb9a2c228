from __future__ import annotations

import typing

if typing.TYPE_CHECKING:
    import httpx

    from ._models import FetchResult
    from ._transports import Transport
    from .fs import FileSystemAdapter

RequestInterceptor = typing.Callable[
    [str, "Config"],
    typing.Union[
        typing.Tuple[str, "Config"], typing.Awaitable[typing.Tuple[str, "Config"]]
    ],
]
ResponseInterceptor = typing.Callable[
    ["httpx.Response"],
    typing.Union["FetchResult", typing.Awaitable["FetchResult"]],
]

# Keys forwarded verbatim to ``httpx.AsyncClient.request``.
TRANSPORT_OPTIONS = ("timeout", "follow_redirects", "auth", "cookies", "extensions")


class Config(typing.TypedDict, total=False):
    method: str
    headers: typing.Dict[str, str]
    body: typing.Union[str, bytes, None]
    request_interceptor: RequestInterceptor
    response_interceptor: ResponseInterceptor
    fs: FileSystemAdapter
    transport: Transport
    encode_params: bool
    timeout: typing.Any
    follow_redirects: bool
    auth: typing.Any
    cookies: typing.Any
    extensions: typing.Dict[str, typing.Any]


def merge_config(
    base: Config | None = None, override: Config | None = None
) -> Config:
    """Return a new configuration with ``override`` layered over ``base``.

    Top-level keys are replaced wholesale, except ``headers`` which are
    combined key by key (``override`` wins on identical names).  Neither
    input is modified and the returned headers are always a fresh dict.
    """
    base = base or {}
    override = override or {}

    merged: dict[str, typing.Any] = {**base, **override}
    if "headers" in base or "headers" in override:
        merged["headers"] = {
            **(base.get("headers") or {}),
            **(override.get("headers") or {}),
        }
    return typing.cast(Config, merged)


def transport_options(config: Config) -> dict[str, typing.Any]:
    return {
        key: config[key]  # type: ignore[literal-required]
        for key in TRANSPORT_OPTIONS
        if key in config
    }
