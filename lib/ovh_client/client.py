from __future__ import annotations

from typing import Any
from urllib.parse import urlencode

import httpx

from .config_types import ClientConfig
from .errors import ApiError
from .resolve import ConfigResolver
from .transport import Transport


class OvhClient:
    """API client whose credentials come from arguments, OVH_* env vars or ovh.conf files.

    Explicit arguments always win. Raises a ConfigError subclass when the
    endpoint is unknown or the application key/secret cannot be found.
    """

    def __init__(
            self,
            endpoint: str | None = None,
            application_key: str | None = None,
            application_secret: str | None = None,
            consumer_key: str | None = None,
            timeout: float = 180.0,
            *,
            resolver: ConfigResolver | None = None,
            http_transport: httpx.BaseTransport | None = None,
    ):
        partial = ClientConfig(
            app_key=application_key or "",
            app_secret=application_secret or "",
            consumer_key=consumer_key or "",
            timeout_s=timeout,
        )
        self._resolver = resolver or ConfigResolver()
        self._t = Transport(self._resolver.resolve(endpoint or "", partial), http_transport=http_transport)

    @property
    def config(self) -> ClientConfig:
        return self._t.config

    @property
    def endpoint(self) -> str:
        return self._t.config.endpoint

    @property
    def consumer_key(self) -> str:
        return self._t.config.consumer_key

    def close(self) -> None:
        self._t.close()

    def __enter__(self) -> OvhClient:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def time_delta(self) -> int:
        return self._t.time_delta()

    def call(self, method: str, path: str, data: Any | None = None, need_auth: bool = True) -> Any:
        return self._t.request(method, path, json_body=data, need_auth=need_auth)

    def get(self, path: str, need_auth: bool = True, **params: Any) -> Any:
        if params:
            path = f"{path}?{urlencode(params)}"
        return self.call("GET", path, need_auth=need_auth)

    def post(self, path: str, data: Any | None = None, need_auth: bool = True) -> Any:
        return self.call("POST", path, data, need_auth=need_auth)

    def put(self, path: str, data: Any | None = None, need_auth: bool = True) -> Any:
        return self.call("PUT", path, data, need_auth=need_auth)

    def delete(self, path: str, need_auth: bool = True) -> Any:
        return self.call("DELETE", path, need_auth=need_auth)

    def request_consumer_key(self, access_rules: list[dict[str, str]], redirection: str | None = None) -> dict[str, Any]:
        """Ask the API for a new consumer key and use it for later calls.

        The key must still be validated by the user at the returned validationUrl.
        """
        body: dict[str, Any] = {"accessRules": access_rules}
        if redirection:
            body["redirection"] = redirection
        data = self._t.request("POST", "/auth/credential", json_body=body, need_auth=False)
        if not isinstance(data, dict) or not data.get("consumerKey"):
            raise ApiError(500, "auth credential returned no consumerKey", None)

        self._t.set_consumer_key(str(data["consumerKey"]))
        return data
