from __future__ import annotations

import dataclasses
import hashlib
import json
import time
from typing import Any

import httpx

from .config_types import ClientConfig
from .errors import ApiError, AuthError, NetworkError, ResourceNotFoundError


def sign_request(
        app_secret: str,
        consumer_key: str,
        method: str,
        url: str,
        body: str,
        timestamp: int,
) -> str:
    """Compute the X-Ovh-Signature header value for a request."""
    payload = "+".join([app_secret, consumer_key, method.upper(), url, body, str(timestamp)])
    return "$1$" + hashlib.sha1(payload.encode("utf-8")).hexdigest()


class Transport:
    def __init__(self, cfg: ClientConfig, *, http_transport: httpx.BaseTransport | None = None):
        self._cfg = cfg
        self._base_url = cfg.endpoint.rstrip("/")
        self._time_delta: int | None = None
        headers = {
            "User-Agent": "ovh-client/0.1.0",
            "X-Ovh-Application": cfg.app_key,
        }

        self._client = httpx.Client(
            base_url=self._base_url,
            timeout=cfg.timeout_s,
            headers=headers,
            follow_redirects=True,
            transport=http_transport,
        )

    @property
    def config(self) -> ClientConfig:
        return self._cfg

    def set_consumer_key(self, consumer_key: str) -> None:
        self._cfg = dataclasses.replace(self._cfg, consumer_key=consumer_key)

    def close(self) -> None:
        self._client.close()

    def time_delta(self) -> int:
        """Seconds to add to the local clock to match the API server clock."""
        if self._time_delta is None:
            server_time = self.request("GET", "/auth/time", need_auth=False)
            self._time_delta = int(server_time) - int(time.time())
        return self._time_delta

    def request(
            self,
            method: str,
            path: str,
            *,
            json_body: Any | None = None,
            need_auth: bool = True,
    ) -> Any:
        method = method.upper()
        body = json.dumps(json_body) if json_body is not None else ""
        headers: dict[str, str] = {}
        if body:
            headers["Content-Type"] = "application/json"

        if need_auth:
            ck = self._cfg.consumer_key
            if not ck:
                raise AuthError(0, "Missing consumer key, request one with request_consumer_key().", None)
            timestamp = int(time.time()) + self.time_delta()
            headers["X-Ovh-Consumer"] = ck
            headers["X-Ovh-Timestamp"] = str(timestamp)
            headers["X-Ovh-Signature"] = sign_request(
                self._cfg.app_secret, ck, method, self._base_url + path, body, timestamp
            )

        try:
            r = self._client.request(method, path, content=body or None, headers=headers)
        except httpx.RequestError as e:
            raise NetworkError(str(e)) from e

        # Try parse body as json for better errors / output
        data: Any = None
        text = None
        try:
            data = r.json()
        except Exception:
            text = r.text

        if r.status_code >= 400:
            msg = f"{method} {path} failed with {r.status_code}"
            details = None

            if isinstance(data, dict) and "message" in data:
                details = json.dumps(data, ensure_ascii=False)
                msg = str(data.get("message") or msg)
            elif text:
                details = text[:1000]

            if r.status_code in (401, 403):
                raise AuthError(r.status_code, msg, details)
            if r.status_code == 404:
                raise ResourceNotFoundError(r.status_code, msg, details)
            raise ApiError(r.status_code, msg, details)

        return data if data is not None else r.text
