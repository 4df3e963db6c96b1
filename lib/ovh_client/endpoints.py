from __future__ import annotations

from types import MappingProxyType

DEFAULT_ENDPOINT = "ovh-eu"

ENDPOINTS = MappingProxyType(
    {
        "ovh-eu": "https://eu.api.ovh.com/1.0",
        "ovh-ca": "https://ca.api.ovh.com/1.0",
        "ovh-us": "https://api.us.ovhcloud.com/1.0",
        "kimsufi-eu": "https://eu.api.kimsufi.com/1.0",
        "kimsufi-ca": "https://ca.api.kimsufi.com/1.0",
        "soyoustart-eu": "https://eu.api.soyoustart.com/1.0",
        "soyoustart-ca": "https://ca.api.soyoustart.com/1.0",
    }
)


def is_url(value: str) -> bool:
    return "/" in value


def canonical_endpoint(value: str) -> str:
    """Return the base URL for an endpoint name or literal URL.

    Anything containing a '/' is taken verbatim. Unknown names give "".
    """
    if is_url(value):
        return value
    return ENDPOINTS.get(value, "")
