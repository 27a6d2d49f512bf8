"""Shared pytest fixtures for the full sconfig test suite."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

from sconfig.handlers import reset_type_handlers


@pytest.fixture(autouse=True)
def _isolated_type_handlers() -> Iterator[None]:
    """Restore the built-in type handlers after every test."""

    yield
    reset_type_handlers()


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[..., Path]:
    """Provide a helper writing UTF-8 config text to a file under `tmp_path`."""

    def _write(content: str, name: str = "test.config") -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write
