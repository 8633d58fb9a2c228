"""
File-system capability for persisting downloaded content.

fetchio never touches the file system on its own.  An adapter can be placed
in a client's configuration under ``"fs"`` so that code holding the client
also holds a matching place to store what it downloads::

    client = fetchio.create_client(
        "https://example.com", {"fs": fetchio.fs.LocalFileSystem("downloads")}
    )
    result = await client.get("/report.pdf").blob()
    if result.success:
        await client.config["fs"].save(result.data, "report.pdf")
"""

from __future__ import annotations

import pathlib
import typing

import anyio

from ._models import Blob

__all__ = ["FileSystemAdapter", "LocalFileSystem"]


class FileSystemAdapter(typing.Protocol):
    async def save(
        self, data: bytes | bytearray | Blob, filename: str
    ) -> typing.Any: ...

    async def load(self, filename: str) -> bytes: ...


class LocalFileSystem:
    """Stores files below ``root`` on the local disk."""

    def __init__(self, root: str | pathlib.Path = ".") -> None:
        self.root = pathlib.Path(root)

    def _resolve(self, filename: str) -> anyio.Path:
        root = self.root.resolve()
        target = (root / filename).resolve()
        if target != root and root not in target.parents:
            raise ValueError(f"{filename!r} resolves outside of {str(self.root)!r}")
        return anyio.Path(target)

    async def save(self, data: bytes | bytearray | Blob, filename: str) -> pathlib.Path:
        target = self._resolve(filename)
        content = data.bytes() if isinstance(data, Blob) else bytes(data)
        await target.parent.mkdir(parents=True, exist_ok=True)
        await target.write_bytes(content)
        return pathlib.Path(target)

    async def load(self, filename: str) -> bytes:
        return await self._resolve(filename).read_bytes()

    def __repr__(self) -> str:
        return f"LocalFileSystem({str(self.root)!r})"
