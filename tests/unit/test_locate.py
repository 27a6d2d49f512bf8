"""Unit tests for config file discovery."""

from __future__ import annotations

from pathlib import Path

import pytest

from sconfig.locate import config_candidates, find_config


def test_config_candidates_follow_search_order() -> None:
    """Candidates should be XDG, home dotfile, system dirs, then the working dir."""

    candidates = config_candidates("/app.conf", {"XDG_CONFIG": "/xdg/", "HOME": "/home/u"})

    assert candidates == [
        Path("/xdg/app.conf"),
        Path("/home/u/.app.conf"),
        Path("/etc/app.conf"),
        Path("/usr/local/etc/app.conf"),
        Path("/usr/pkg/etc/app.conf"),
        Path("app.conf"),
    ]


def test_config_candidates_skip_unset_and_blank_variables() -> None:
    """Blank environment values should not produce candidates."""

    candidates = config_candidates("app.conf", {"XDG_CONFIG": "  "})

    assert candidates[0] == Path("/etc/app.conf")


def test_find_config_returns_none_when_nothing_exists(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """A name that exists nowhere should not be found."""

    monkeypatch.chdir(tmp_path)

    assert find_config("sure_this_wont_exist/anywhere", {}) is None


def test_find_config_prefers_xdg_over_home(tmp_path: Path) -> None:
    """The XDG directory should win over the home dotfile."""

    xdg = tmp_path / "xdg"
    home = tmp_path / "home"
    xdg.mkdir()
    home.mkdir()
    (xdg / "app.conf").write_text("", encoding="utf-8")
    (home / ".app.conf").write_text("", encoding="utf-8")
    env = {"XDG_CONFIG": str(xdg), "HOME": str(home)}

    assert find_config("app.conf", env) == xdg / "app.conf"

    (xdg / "app.conf").unlink()

    assert find_config("app.conf", env) == home / ".app.conf"


def test_find_config_falls_back_to_working_directory(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """A file in the working directory should be found last."""

    monkeypatch.chdir(tmp_path)
    (tmp_path / "sconfig-test-local.conf").write_text("", encoding="utf-8")

    assert find_config("sconfig-test-local.conf", {}) == Path("sconfig-test-local.conf")


def test_find_config_reads_process_environment_by_default(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Without an explicit mapping the process environment should be used."""

    (tmp_path / "app.conf").write_text("", encoding="utf-8")
    monkeypatch.setenv("XDG_CONFIG", str(tmp_path))

    assert find_config("app.conf") == tmp_path / "app.conf"
