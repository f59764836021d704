from pathlib import Path

import pytest

from servicelog import reset_registry


@pytest.fixture(autouse=True)
def fresh_registry():
    """Every test starts and ends with an empty default registry."""
    reset_registry()
    yield
    reset_registry()


@pytest.fixture
def logs_dir(tmp_path: Path) -> Path:
    """A not-yet-existing logs directory inside the test's tmp dir."""
    return tmp_path / "logs"
