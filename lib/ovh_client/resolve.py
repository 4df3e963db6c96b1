from __future__ import annotations

import dataclasses
import os
from typing import Iterable, Mapping

from .config_files import Sections, default_config_paths, load_config_files, source_state
from .config_types import ClientConfig
from .endpoints import DEFAULT_ENDPOINT, canonical_endpoint
from .errors import MissingApplicationKeyError, MissingApplicationSecretError, UnknownEndpointError

ENV_PREFIX = "OVH_"

# ClientConfig attribute -> key used both in config files and as OVH_<KEY> env var
FIELD_KEYS = {
    "app_key": "application_key",
    "app_secret": "application_secret",
    "consumer_key": "consumer_key",
}


def env_name(key: str) -> str:
    return ENV_PREFIX + key.upper()


class ConfigResolver:
    """Resolve endpoint and credentials from explicit values, OVH_* env vars and ovh.conf files.

    Precedence per field, highest first: value already set on the config,
    environment variable, merged file value, default. Files are merged in
    order (/etc/ovh.conf, ~/.ovh.conf, ./ovh.conf), later ones winning.
    """

    def __init__(
            self,
            paths: Iterable[str | os.PathLike[str]] | None = None,
            environ: Mapping[str, str] | None = None,
    ):
        self._paths = list(paths) if paths is not None else None
        self._environ = environ

    @property
    def paths(self) -> list[str]:
        if self._paths is None:
            return default_config_paths()
        return [os.fspath(p) for p in self._paths]

    @property
    def environ(self) -> Mapping[str, str]:
        return os.environ if self._environ is None else self._environ

    def sources(self) -> list[tuple[str, str]]:
        return [(p, source_state(p)) for p in self.paths]

    def lookup(self, sections: Sections, section: str, key: str, default: str = "") -> str:
        from_env = self.environ.get(env_name(key)) or ""
        if from_env:
            return from_env
        return sections.get(section, {}).get(key, default)

    def resolve(self, endpoint_name: str = "", config: ClientConfig | None = None) -> ClientConfig:
        config = config or ClientConfig()
        sections = load_config_files(self.paths)

        section = endpoint_name or config.endpoint
        if not section:
            section = self.lookup(sections, "default", "endpoint", DEFAULT_ENDPOINT)

        values = {
            attr: getattr(config, attr) or self.lookup(sections, section, key)
            for attr, key in FIELD_KEYS.items()
        }

        endpoint = canonical_endpoint(section)
        if not endpoint:
            raise UnknownEndpointError(section)
        if not values["app_key"]:
            raise MissingApplicationKeyError()
        if not values["app_secret"]:
            raise MissingApplicationSecretError()

        return dataclasses.replace(config, endpoint=endpoint, **values)


def resolve_config(endpoint_name: str = "", config: ClientConfig | None = None) -> ClientConfig:
    return ConfigResolver().resolve(endpoint_name, config)
