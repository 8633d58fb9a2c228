"""
Testing Without a Network
=========================

Any object with an ``async perform(url, config)`` method can act as the
transport.  ``HTTPXTransport`` accepts the usual httpx client options, so
``httpx.MockTransport`` plugs straight in.
"""

import asyncio

import httpx

import fetchio


def handler(request: httpx.Request) -> httpx.Response:
    if request.url.path == "/users/1":
        return httpx.Response(200, json={"id": 1, "name": "Alice"})
    return httpx.Response(404, text="Not Found")


async def main() -> None:
    transport = fetchio.HTTPXTransport(transport=httpx.MockTransport(handler))
    api = fetchio.create_client("https://api.example.com", {"transport": transport})

    print(await api.get("/users/1").json())
    print(await api.get("/users/2").string())

    # ── A hand-written transport ────────────────────────────────────────
    class StaticTransport:
        async def perform(self, url: str, options: fetchio.Config) -> httpx.Response:
            return httpx.Response(200, text=f"{options.get('method')} {url}")

    static = fetchio.create_client("https://anything", {"transport": StaticTransport()})
    print(await static.delete("/x").param("soft", "true").string())


if __name__ == "__main__":
    asyncio.run(main())
