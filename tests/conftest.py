import tempfile
from collections.abc import Generator
from pathlib import Path

import pytest


@pytest.fixture
def skills_root() -> Generator[Path, None, None]:
    """A temporary directory holding skill directories."""
    with tempfile.TemporaryDirectory(prefix="agent_skills_") as tmp:
        yield Path(tmp).resolve()


@pytest.fixture
def other_root() -> Generator[Path, None, None]:
    """A second, independent skill root."""
    with tempfile.TemporaryDirectory(prefix="agent_skills_other_") as tmp:
        yield Path(tmp).resolve()
