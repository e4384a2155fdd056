from __future__ import annotations

from pathlib import Path
from typing import Iterator

import pytest

from dockgen.logging import reset_logging
from tests._fixtures.repo_builder import RepoBuilder


@pytest.fixture
def repo_builder(tmp_path: Path) -> RepoBuilder:
    """Provide a reusable project builder rooted at the pytest tmp_path."""
    return RepoBuilder(tmp_path)


@pytest.fixture(autouse=True)
def _reset_dockgen_logger() -> Iterator[None]:
    """Undo CLI logging setup so handlers never outlive a captured stream."""
    yield
    reset_logging()
