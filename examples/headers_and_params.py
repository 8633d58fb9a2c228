"""
Headers, Query Parameters & Paths
=================================

Shows how configuration is layered:

* client configuration (``create_client`` / ``sub``),
* per-call options (second argument of ``get``/``delete``, third of
  ``post``/``put``/``patch``),
* builder methods (``header``, ``headers``, ``param``, ``params``, ``path``).

Headers merge key by key at every layer; later layers win.
"""

import asyncio

import fetchio


async def main() -> None:
    api = fetchio.create_client(
        "https://httpbin.org", {"headers": {"User-Agent": "fetchio-example"}}
    )

    # ── Sub-clients add path and configuration ──────────────────────────
    anything = api.sub("/anything", {"headers": {"X-Team": "data"}})
    print(f"base path: {anything.base_path}")

    # ── Builder configuration ───────────────────────────────────────────
    result = await (
        anything.get("/users", {"headers": {"X-Call": "1"}})
        .path("/42")
        .param("expand", "groups")
        .params({"page": "2", "per_page": "50"})
        .header("X-Request-Id", "abc-123")
        .json()
    )
    print(f"URL sent: {result.data['url']}")
    for name in ("User-Agent", "X-Team", "X-Call", "X-Request-Id"):
        print(f"  {name}: {result.data['headers'].get(name)}")
    print()

    # ── Query values are sent literally unless asked otherwise ──────────
    literal = api.get("/get").param("q", "a b")
    encoded = api.get("/get", {"encode_params": True}).param("q", "a b&c")
    print(f"literal: {literal.build_url()}")
    print(f"encoded: {encoded.build_url()}")


if __name__ == "__main__":
    asyncio.run(main())
