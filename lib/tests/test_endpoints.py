from __future__ import annotations

import pytest

from ovh_client.endpoints import DEFAULT_ENDPOINT, ENDPOINTS, canonical_endpoint


def test_known_names_map_to_urls() -> None:
    assert canonical_endpoint("ovh-eu") == "https://eu.api.ovh.com/1.0"
    assert canonical_endpoint("soyoustart-ca") == "https://ca.api.soyoustart.com/1.0"
    assert DEFAULT_ENDPOINT in ENDPOINTS


def test_unknown_name_is_empty() -> None:
    assert canonical_endpoint("ovh-mars") == ""
    assert canonical_endpoint("") == ""


def test_url_is_verbatim() -> None:
    assert canonical_endpoint("https://api.example.com/1.0") == "https://api.example.com/1.0"
    assert canonical_endpoint("http://localhost:8080/") == "http://localhost:8080/"


def test_table_is_read_only() -> None:
    with pytest.raises(TypeError):
        ENDPOINTS["ovh-mars"] = "https://mars.api.ovh.com/1.0"  # type: ignore[index]
