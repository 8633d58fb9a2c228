from __future__ import annotations

import re
import typing

UNRESERVED_CHARACTERS = (
    "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-._~"
)
# Characters left as-is inside a query key or value.  "&", "=", "+" and "#"
# are structural in a query string and therefore always escaped.
QUERY_VALUE_SAFE = "!$'()*,;:@/?"

PERCENT_ENCODED_REGEX = re.compile("%[A-Fa-f0-9]{2}")


def _percent_encode(string: str) -> str:
    return "".join(f"%{byte:02X}" for byte in string.encode("utf-8"))


def _percent_encoded(string: str, safe: str) -> str:
    non_escaped = UNRESERVED_CHARACTERS + safe
    if not string.rstrip(non_escaped):
        return string
    return "".join(c if c in non_escaped else _percent_encode(c) for c in string)


def quote_query_value(value: typing.Any, safe: str = QUERY_VALUE_SAFE) -> str:
    """Percent-encode a query key or value, keeping existing ``%XX`` escapes."""
    string = str(value)
    parts: list[str] = []
    pos = 0
    for match in PERCENT_ENCODED_REGEX.finditer(string):
        start, end = match.start(), match.end()
        if start != pos:
            parts.append(_percent_encoded(string[pos:start], safe=safe))
        parts.append(match.group(0))
        pos = end
    if pos != len(string):
        parts.append(_percent_encoded(string[pos:], safe=safe))
    return "".join(parts)


def compose_url(
    base: str,
    params: typing.Mapping[str, typing.Any] | None = None,
    *,
    encode: bool = False,
) -> str:
    """Append ``params`` to ``base`` as a query string.

    ``base`` is used exactly as given; slashes are never added or removed.
    Parameters keep their insertion order.  Values are written literally
    unless ``encode`` is set, in which case keys and values are
    percent-encoded.
    """
    if not params:
        return base

    if encode:
        pairs = (
            f"{quote_query_value(key)}={quote_query_value(value)}"
            for key, value in params.items()
        )
    else:
        pairs = (f"{key}={value}" for key, value in params.items())
    return f"{base}?{'&'.join(pairs)}"
