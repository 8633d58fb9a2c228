"""
Basic Requests
==============

Demonstrates the verb methods: get, post, put, patch, delete.
Every call returns a builder; awaiting a decode method sends the request and
returns a ``FetchResult(success, data)`` pair.
"""

import asyncio

import fetchio


async def main() -> None:
    httpbin = fetchio.create_client("https://httpbin.org")

    # ── GET ──────────────────────────────────────────────────────────────
    result = await httpbin.get("/get").json()
    print(f"GET    → success={result.success}")
    print(f"  URL: {result.data['url']}")
    print()

    # ── POST a string ────────────────────────────────────────────────────
    result = await httpbin.post("/post", "Hello, world!").json()
    print(f"POST   → success={result.success}")
    print(f"  Body echoed: {result.data['data']}")
    print()

    # ── PUT a JSON document ──────────────────────────────────────────────
    result = await httpbin.put("/put", {"name": "updated"}).json()
    print(f"PUT    → success={result.success}")
    print(f"  JSON echoed: {result.data['json']}")
    print()

    # ── PATCH a form ─────────────────────────────────────────────────────
    form = fetchio.FormData([("field", "partial"), ("field", "update")])
    result = await httpbin.patch("/patch", form).json()
    print(f"PATCH  → success={result.success}")
    print(f"  Form echoed: {result.data['form']}")
    print()

    # ── DELETE, ignoring the body ────────────────────────────────────────
    result = await httpbin.delete("/delete").void()
    print(f"DELETE → {result}")
    print()

    # ── Errors are results, not exceptions ───────────────────────────────
    result = await httpbin.get("/status/404").string()
    print(f"404    → success={result.success} data={result.data!r}")


if __name__ == "__main__":
    asyncio.run(main())
