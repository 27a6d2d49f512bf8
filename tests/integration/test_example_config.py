"""Integration test parsing the bundled example configuration."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
import re

import pytest

from sconfig import find_config, must_parse
from sconfig.handlers import regexp
from sconfig.types import Int64

_REPO_ROOT = Path(__file__).resolve().parents[2]
_EXAMPLE_NAME = "example.config"


@dataclass
class ServiceConfig:
    """Configuration of a small example service."""

    port: Int64 = Int64(0)
    base_url: str = ""
    match: list[re.Pattern[str]] = field(default_factory=list)
    order: list[str] = field(default_factory=list)
    hosts: list[str] = field(default_factory=list)
    address: str = ""
    motd: str = ""
    max_connections: int = 0
    debug: bool = True


def test_example_config_populates_every_field(monkeypatch: pytest.MonkeyPatch) -> None:
    """The example file, including its sourced limits, should bind to every field."""

    monkeypatch.chdir(_REPO_ROOT)
    regexp.register()
    known_hosts = {"localhost": "127.0.0.1"}
    config = ServiceConfig()

    def resolve_address(values: list[str]) -> None:
        config.address = known_hosts[values[0]]

    path = find_config(_EXAMPLE_NAME, {"XDG_CONFIG": str(Path("tests") / "files")})
    assert path == Path("tests") / "files" / _EXAMPLE_NAME

    must_parse(config, path, {"address": resolve_address})

    assert config.port == 8080
    assert config.base_url == "http://example.com"
    assert [pattern.pattern for pattern in config.match] == ["^foo.+", "^b[ao]r"]
    assert config.order == ["allow", "deny"]
    assert config.hosts == ["arp242.net", "goatcounter.com"]
    assert config.address == "127.0.0.1"
    assert config.motd == "Hello  world # not a comment"
    assert config.max_connections == 512
    assert config.debug is False
