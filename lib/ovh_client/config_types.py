from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class ClientConfig:
    endpoint: str = ""
    app_key: str = ""
    app_secret: str = ""
    consumer_key: str = ""
    timeout_s: float = 180.0
