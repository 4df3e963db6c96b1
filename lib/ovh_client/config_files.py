from __future__ import annotations

import configparser
import logging
import os
from pathlib import Path
from typing import Iterable

log = logging.getLogger(__name__)

SYSTEM_CONFIG_PATH = "/etc/ovh.conf"
USER_CONFIG_NAME = ".ovh.conf"
LOCAL_CONFIG_PATH = "./ovh.conf"

# section -> key -> value
Sections = dict[str, dict[str, str]]


def current_user_home() -> Path | None:
    # No passwd entry, unset HOME, etc. just means there is no user file to read.
    try:
        return Path.home()
    except (RuntimeError, KeyError, OSError):
        return None


def default_config_paths() -> list[str]:
    """Candidate files, lowest precedence first."""
    paths = [SYSTEM_CONFIG_PATH]
    home = current_user_home()
    if home is not None:
        paths.append(str(home / USER_CONFIG_NAME))
    paths.append(LOCAL_CONFIG_PATH)
    return paths


def is_readable(path: str | os.PathLike[str]) -> bool:
    return os.path.isfile(path) and os.access(path, os.R_OK)


def parse_config_file(path: str | os.PathLike[str]) -> Sections | None:
    """Parse one readable INI file into plain dicts, or None if it cannot be used."""
    # Header lines never contain a newline, so [DEFAULT] is read as an ordinary
    # section instead of leaking its keys into every other one. Repeated keys
    # keep the last value.
    parser = configparser.ConfigParser(interpolation=None, strict=False, default_section="\n")
    try:
        with open(path, encoding="utf-8") as f:
            parser.read_file(f, source=str(path))
    except (OSError, UnicodeDecodeError, configparser.Error) as e:
        log.warning("ignoring config file %s: %s", path, e)
        return None
    return {name: dict(parser.items(name, raw=True)) for name in parser.sections()}


def load_config_file(path: str | os.PathLike[str]) -> Sections:
    """A missing, unreadable or malformed file yields an empty mapping."""
    if not is_readable(path):
        log.debug("config file %s not readable, skipping", path)
        return {}

    sections = parse_config_file(path)
    if sections is None:
        return {}
    log.debug("loaded config file %s", path)
    return sections


def source_state(path: str | os.PathLike[str]) -> str:
    """One of "loaded", "ignored" (readable but malformed) or "missing"."""
    if not is_readable(path):
        return "missing"
    if parse_config_file(path) is None:
        return "ignored"
    return "loaded"


def merge_layer(base: Sections, layer: Sections) -> Sections:
    merged = {name: dict(values) for name, values in base.items()}
    for name, values in layer.items():
        merged.setdefault(name, {}).update(values)
    return merged


def merge_layers(layers: Iterable[Sections]) -> Sections:
    merged: Sections = {}
    for layer in layers:
        merged = merge_layer(merged, layer)
    return merged


def load_config_files(paths: Iterable[str | os.PathLike[str]]) -> Sections:
    return merge_layers(load_config_file(p) for p in paths)
