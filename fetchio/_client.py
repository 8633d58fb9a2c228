from __future__ import annotations

import typing

from ._builder import RequestBuilder
from ._config import merge_config
from ._payload import apply_payload

if typing.TYPE_CHECKING:
    from ._config import Config


class Client:
    """A base path bound to a configuration.

    Each verb method returns a fresh :class:`~fetchio.RequestBuilder`; the
    client itself holds no per-request state and may be shared freely::

        api = fetchio.create_client("https://api.example.com", {"timeout": 5})
        users = api.sub("/users", {"headers": {"Authorization": "Bearer ..."}})
        result = await users.get("/42").json()

    Paths are joined by plain string concatenation, so callers decide where
    slashes go.
    """

    def __init__(self, base_path: str = "/", config: Config | None = None) -> None:
        self._base_path = base_path
        self._config: Config = merge_config(config)

    @property
    def base_path(self) -> str:
        return self._base_path

    @property
    def config(self) -> Config:
        return self._config

    def path(self, append: str) -> Client:
        """Return a client for ``base_path + append`` with a copy of this config."""
        return type(self)(self._base_path + append, merge_config(self._config))

    def sub(self, sub_path: str, config: Config | None = None) -> Client:
        """Return a client for ``base_path + sub_path`` with ``config`` merged in."""
        return type(self)(
            self._base_path + sub_path, merge_config(self._config, config)
        )

    def get(self, url: str = "", options: Config | None = None) -> RequestBuilder:
        return self._request(url, "GET", None, options)

    def post(
        self, url: str = "", data: typing.Any = None, options: Config | None = None
    ) -> RequestBuilder:
        return self._request(url, "POST", data, options)

    def put(
        self, url: str = "", data: typing.Any = None, options: Config | None = None
    ) -> RequestBuilder:
        return self._request(url, "PUT", data, options)

    def patch(
        self, url: str = "", data: typing.Any = None, options: Config | None = None
    ) -> RequestBuilder:
        return self._request(url, "PATCH", data, options)

    def delete(self, url: str = "", options: Config | None = None) -> RequestBuilder:
        return self._request(url, "DELETE", None, options)

    del_ = delete

    def _request(
        self,
        url: str,
        method: str,
        payload: typing.Any = None,
        options: Config | None = None,
    ) -> RequestBuilder:
        config = merge_config(self._config, options)
        config["method"] = method
        return RequestBuilder(self._base_path + url, apply_payload(config, payload))

    def __repr__(self) -> str:
        return f"<{type(self).__name__} base_path={self._base_path!r}>"


def create_client(base_path: str = "/", config: Config | None = None) -> Client:
    """Create a :class:`Client` bound to ``base_path`` and ``config``."""
    return Client(base_path, config)
