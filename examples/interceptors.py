"""
Interceptors
============

A request interceptor receives ``(url, config)`` before sending and returns
the pair actually used.  A response interceptor receives the raw
``httpx.Response`` and returns the ``FetchResult`` handed to the caller,
whatever decode method was awaited.
"""

import asyncio

import httpx

import fetchio


async def add_token(url: str, config: fetchio.Config):
    token = "example-token"
    return url, fetchio.merge_config(config, {"headers": {"Authorization": f"Bearer {token}"}})


async def unwrap_envelope(response: httpx.Response) -> fetchio.FetchResult:
    body = response.json()
    return fetchio.FetchResult(response.is_success, body.get("headers"))


async def main() -> None:
    api = fetchio.create_client(
        "https://httpbin.org",
        {"request_interceptor": add_token, "response_interceptor": unwrap_envelope},
    )

    # ``void()`` would normally discard the body; the interceptor decides.
    result = await api.get("/headers").void()
    print(f"success: {result.success}")
    print(f"Authorization seen by server: {result.data['Authorization']}")


if __name__ == "__main__":
    asyncio.run(main())
