from __future__ import annotations

import typing


class FetchResult(typing.NamedTuple):
    """Outcome of a terminal builder call.

    ``success`` mirrors the transport's "ok" flag (status 200-399) unless a
    response interceptor decided otherwise.  ``data`` is ``None`` for
    ``void()`` and whenever an interceptor reports no data.
    """

    success: bool
    data: typing.Any = None


class Blob:
    __slots__ = ("_content", "content_type")

    def __init__(self, content: bytes = b"", content_type: str = "") -> None:
        self._content = bytes(content)
        self.content_type = content_type

    @property
    def size(self) -> int:
        return len(self._content)

    def bytes(self) -> bytes:
        return self._content

    def text(self, encoding: str = "utf-8") -> str:
        return self._content.decode(encoding)

    def __len__(self) -> int:
        return len(self._content)

    def __eq__(self, other: typing.Any) -> bool:
        if not isinstance(other, Blob):
            return NotImplemented
        return (
            self._content == other._content
            and self.content_type == other.content_type
        )

    def __hash__(self) -> int:
        return hash((self._content, self.content_type))

    def __repr__(self) -> str:
        pieces = [f"size={self.size}"]
        if self.content_type:
            pieces.append(f"content_type={self.content_type!r}")
        return f"Blob({', '.join(pieces)})"
