"""
Outbound payload encoding.

A payload is classified by its Python type and turned into a request body
plus the headers that body implies:

* :class:`FormData`: form-encoded pairs, ``application/x-www-form-urlencoded``
* mapping, list or tuple: JSON text, ``application/json``
* ``str``: the string verbatim, ``text/plain``
* ``bytes``: the bytes verbatim, ``application/octet-stream``
* ``None`` or ``""``: no body and no headers

The implied headers are defaults only: a header with the same name
(case-insensitively) already present in the request configuration wins.
"""

from __future__ import annotations

import json
import typing
from collections.abc import Mapping
from urllib.parse import urlencode

from ._exceptions import UnsupportedPayload

if typing.TYPE_CHECKING:
    from ._config import Config

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"
JSON_CONTENT_TYPE = "application/json"
TEXT_CONTENT_TYPE = "text/plain"
BINARY_CONTENT_TYPE = "application/octet-stream"


class FormData:
    """Ordered, multi-valued collection of form fields.

    >>> form = FormData({"name": "Ada"})
    >>> form.append("tag", "a")
    >>> form.append("tag", "b")
    >>> form.getall("tag")
    ['a', 'b']
    """

    __slots__ = ("_items",)

    def __init__(
        self,
        fields: Mapping[str, str] | typing.Iterable[tuple[str, str]] | None = None,
    ) -> None:
        self._items: list[tuple[str, str]] = []
        if fields is None:
            return
        pairs = fields.items() if isinstance(fields, Mapping) else fields
        for key, value in pairs:
            self.append(key, value)

    def append(self, key: str, value: typing.Any) -> None:
        self._items.append((key, str(value)))

    def set(self, key: str, value: typing.Any) -> None:
        self.delete(key)
        self.append(key, value)

    def delete(self, key: str) -> None:
        self._items = [item for item in self._items if item[0] != key]

    def get(self, key: str, default: str | None = None) -> str | None:
        for item_key, value in self._items:
            if item_key == key:
                return value
        return default

    def getall(self, key: str) -> list[str]:
        return [value for item_key, value in self._items if item_key == key]

    def items(self) -> list[tuple[str, str]]:
        return list(self._items)

    def __contains__(self, key: object) -> bool:
        return any(item_key == key for item_key, _ in self._items)

    def __iter__(self) -> typing.Iterator[str]:
        return iter(dict.fromkeys(key for key, _ in self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: typing.Any) -> bool:
        return isinstance(other, FormData) and self._items == other._items

    def __repr__(self) -> str:
        return f"FormData({self._items!r})"


class EncodedPayload(typing.NamedTuple):
    headers: dict[str, str]
    body: str | bytes | None


def encode_payload(payload: typing.Any) -> EncodedPayload:
    if payload is None or (isinstance(payload, str) and not payload):
        return EncodedPayload({}, None)

    if isinstance(payload, FormData):
        return EncodedPayload(
            {"Content-Type": FORM_CONTENT_TYPE}, urlencode(payload.items())
        )

    if isinstance(payload, (Mapping, list, tuple)):
        body = json.dumps(dict(payload) if isinstance(payload, Mapping) else payload)
        return EncodedPayload({"Content-Type": JSON_CONTENT_TYPE}, body)

    if isinstance(payload, str):
        return EncodedPayload({"Content-Type": TEXT_CONTENT_TYPE}, payload)

    if isinstance(payload, (bytes, bytearray)):
        return EncodedPayload({"Content-Type": BINARY_CONTENT_TYPE}, bytes(payload))

    raise UnsupportedPayload(payload)


def apply_payload(config: Config, payload: typing.Any) -> Config:
    """Return a copy of ``config`` carrying the encoded ``payload``.

    Headers implied by the payload are only added when the configuration
    does not already define a header of the same name.
    """
    encoded = encode_payload(payload)
    if encoded.body is None:
        return config

    configured = config.get("headers") or {}
    present = {name.lower() for name in configured}
    defaults = {
        name: value
        for name, value in encoded.headers.items()
        if name.lower() not in present
    }

    result = typing.cast("Config", dict(config))
    result["headers"] = {**defaults, **configured}
    result["body"] = encoded.body
    return result
