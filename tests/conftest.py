from __future__ import annotations

from pathlib import Path

import pytest

from gcmd.store import RecipeStore, resolve_dir
from gcmd.ui.console import Console, set_console


@pytest.fixture(autouse=True)
def _fresh_console():
    set_console(Console())
    yield
    set_console(Console())


@pytest.fixture
def home(tmp_path: Path, monkeypatch) -> Path:
    h = tmp_path / "home"
    h.mkdir()
    monkeypatch.setenv("HOME", str(h))
    return h


@pytest.fixture
def store(home: Path) -> RecipeStore:
    return RecipeStore(resolve_dir(home))
