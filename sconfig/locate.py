"""Config file discovery in conventional locations.

Responsibilities:
- Build the ordered list of candidate paths for a config file name.
- Return the first candidate that exists.

Search order:
- ``$XDG_CONFIG/<name>``
- ``$HOME/.<name>``
- ``/etc/<name>``
- ``/usr/local/etc/<name>``
- ``/usr/pkg/etc/<name>``
- ``./<name>``
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping

from .parsing import normalize_optional_string


_SYSTEM_CONFIG_DIRS = (
    Path("/etc"),
    Path("/usr/local/etc"),
    Path("/usr/pkg/etc"),
)


def config_candidates(name: str, env: Mapping[str, str] | None = None) -> list[Path]:
    """Return candidate paths for `name` in search order."""

    source = os.environ if env is None else env
    name = name.lstrip("/")

    candidates: list[Path] = []
    xdg_config = normalize_optional_string(source.get("XDG_CONFIG"))
    if xdg_config is not None:
        candidates.append(Path(xdg_config.rstrip("/") or "/") / name)
    home = normalize_optional_string(source.get("HOME"))
    if home is not None:
        candidates.append(Path(home) / f".{name}")
    candidates.extend(directory / name for directory in _SYSTEM_CONFIG_DIRS)
    candidates.append(Path(".") / name)
    return candidates


def find_config(name: str, env: Mapping[str, str] | None = None) -> Path | None:
    """Return the first existing config file named `name`, or `None`."""

    for candidate in config_candidates(name, env):
        if candidate.exists():
            return candidate
    return None
