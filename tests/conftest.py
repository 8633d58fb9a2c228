import json
import threading
import time
import typing
from urllib.parse import parse_qsl

import httpx
import pytest
from uvicorn.config import Config
from uvicorn.server import Server

import fetchio


@pytest.fixture
def anyio_backend():
    return "asyncio"


Message = typing.Dict[str, typing.Any]
Receive = typing.Callable[[], typing.Awaitable[Message]]
Send = typing.Callable[
    [typing.Dict[str, typing.Any]], typing.Coroutine[None, None, None]
]
Scope = typing.Dict[str, typing.Any]


async def read_body(receive: Receive) -> bytes:
    body = b""
    more_body = True
    while more_body:
        message = await receive()
        body += message.get("body", b"")
        more_body = message.get("more_body", False)
    return body


async def respond(
    send: Send, status: int, body: bytes = b"", content_type: str = "text/plain"
) -> None:
    await send(
        {
            "type": "http.response.start",
            "status": status,
            "headers": [[b"content-type", content_type.encode()]],
        }
    )
    await send({"type": "http.response.body", "body": body})


async def respond_json(send: Send, data: typing.Any, status: int = 200) -> None:
    await respond(send, status, json.dumps(data).encode(), "application/json")


def parse_json(body: bytes) -> typing.Any:
    try:
        return json.loads(body)
    except ValueError:
        return {}


async def app(scope: Scope, receive: Receive, send: Send) -> None:
    assert scope["type"] == "http"
    path = scope["path"]
    if path in ("/hello", "/hello/world"):
        await hello(scope, receive, send)
    elif path == "/query":
        await echo_query(scope, receive, send)
    elif path == "/headers":
        await echo_headers(scope, receive, send)
    elif path == "/formats":
        await formats(scope, receive, send)
    elif path == "/form":
        await form(scope, receive, send)
    elif path == "/text":
        await echo_text(scope, receive, send)
    elif path.startswith("/echo"):
        await echo(scope, receive, send)
    elif path.startswith("/error/"):
        await error(scope, receive, send)
    elif path == "/malformed":
        await respond(send, 200, b"{not json", "application/json")
    else:
        await respond(send, 404, b"Not Found")


async def hello(scope: Scope, receive: Receive, send: Send) -> None:
    method = scope["method"]
    name = "Hello World" if scope["path"] == "/hello/world" else "Hello"
    if method == "GET":
        await respond_json(send, {"message": f"{name} GET"})
    elif method == "DELETE":
        await respond(send, 204 if scope["path"] == "/hello/world" else 200)
    else:
        body = parse_json(await read_body(receive))
        await respond_json(send, {"message": f"{name} {method}", "data": body})


async def echo_query(scope: Scope, receive: Receive, send: Send) -> None:
    query = scope["query_string"].decode()
    await respond_json(
        send, {"params": dict(parse_qsl(query, keep_blank_values=True)), "raw": query}
    )


async def echo_headers(scope: Scope, receive: Receive, send: Send) -> None:
    headers = {name.decode(): value.decode() for name, value in scope["headers"]}
    await respond_json(send, {"headers": headers})


async def formats(scope: Scope, receive: Receive, send: Send) -> None:
    query = dict(parse_qsl(scope["query_string"].decode()))
    fmt = query.get("format", "json")
    if fmt == "text":
        await respond(send, 200, b"Plain text response")
    elif fmt == "blob":
        await respond(send, 200, b"Blob data", "application/octet-stream")
    elif fmt == "arrayBuffer":
        await respond(send, 200, b"Binary data", "application/octet-stream")
    else:
        await respond_json(send, {"format": "json data"})


async def form(scope: Scope, receive: Receive, send: Send) -> None:
    headers = dict(scope["headers"])
    content_type = headers.get(b"content-type", b"").decode()
    body = (await read_body(receive)).decode()
    if "application/x-www-form-urlencoded" not in content_type:
        await respond_json(send, {"success": False, "data": {}}, status=400)
        return
    await respond_json(send, {"success": True, "data": dict(parse_qsl(body))})


async def echo_text(scope: Scope, receive: Receive, send: Send) -> None:
    body = (await read_body(receive)).decode()
    headers = {name.decode(): value.decode() for name, value in scope["headers"]}
    await respond_json(
        send, {"received": body, "content_type": headers.get("content-type")}
    )


async def echo(scope: Scope, receive: Receive, send: Send) -> None:
    body = await read_body(receive)
    await respond_json(
        send,
        {
            "method": scope["method"],
            "path": scope["path"],
            "query": scope["query_string"].decode(),
            "headers": {
                name.decode(): value.decode() for name, value in scope["headers"]
            },
            "body": body.decode(),
        },
    )


async def error(scope: Scope, receive: Receive, send: Send) -> None:
    errors = {
        "/error/bad-request": (400, b"Bad Request"),
        "/error/not-found": (404, b"Not Found"),
        "/error/server": (500, b"Internal Server Error"),
    }
    status, body = errors.get(scope["path"], (418, b"I'm a teapot"))
    await respond(send, status, body)


@pytest.fixture
def transport() -> fetchio.HTTPXTransport:
    return fetchio.HTTPXTransport(transport=httpx.ASGITransport(app=app))


@pytest.fixture
def client(transport: fetchio.HTTPXTransport) -> fetchio.Client:
    return fetchio.create_client("http://testserver", {"transport": transport})


class TestServer(Server):
    def install_signal_handlers(self) -> None:
        # Signals can only be installed on the main thread.
        pass

    @property
    def url(self) -> str:
        port = self.servers[0].sockets[0].getsockname()[1]
        return f"http://{self.config.host}:{port}"


def serve_in_thread(server: TestServer) -> typing.Iterator[TestServer]:
    thread = threading.Thread(target=server.run)
    thread.start()
    try:
        while not server.started:
            time.sleep(1e-3)
        yield server
    finally:
        server.should_exit = True
        thread.join()


@pytest.fixture(scope="session")
def server() -> typing.Iterator[TestServer]:
    config = Config(app=app, lifespan="off", loop="asyncio", host="127.0.0.1", port=0)
    server = TestServer(config=config)
    yield from serve_in_thread(server)
