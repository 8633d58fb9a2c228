"""
Downloading Files
=================

Fetch a binary resource as a ``Blob`` and persist it with the file-system
adapter carried in the client configuration.
"""

import asyncio

import fetchio
from fetchio.fs import LocalFileSystem


async def main() -> None:
    client = fetchio.create_client(
        "https://httpbin.org", {"fs": LocalFileSystem("downloads")}
    )

    result = await client.get("/image/png").blob()
    if not result.success:
        print("download failed")
        return

    blob: fetchio.Blob = result.data
    print(f"received {blob!r}")

    path = await client.config["fs"].save(blob, "image.png")
    print(f"saved to {path}")

    restored = await client.config["fs"].load("image.png")
    print(f"reloaded {len(restored)} bytes")


if __name__ == "__main__":
    asyncio.run(main())
