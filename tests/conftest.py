"""Shared fixtures for the test smell scanner tests."""

from pathlib import Path
from typing import Callable

import pytest

from smells_analyzer.core.engine import create_default_engine


@pytest.fixture
def engine():
    """Engine with the full default catalog."""
    return create_default_engine()


@pytest.fixture
def write_source(tmp_path) -> Callable[..., Path]:
    """Factory writing a source file under a fake src/test/java tree."""
    root = tmp_path / "src" / "test" / "java"
    root.mkdir(parents=True)

    def _write(relative: str, *lines: str) -> Path:
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    _write.root = root
    return _write
