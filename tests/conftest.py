from pathlib import Path
from unittest.mock import MagicMock

import pytest

from asset_build.compression.models import InvocationResult
from asset_build.compression.runner import ProcessRunner


@pytest.fixture()
def script_file(tmp_path: Path) -> Path:
    """A small script asset on disk."""
    path = tmp_path / "app.js"
    path.write_text("function add(a, b) { return a + b; }\n")
    return path


@pytest.fixture()
def stylesheet_file(tmp_path: Path) -> Path:
    """A small stylesheet asset on disk."""
    path = tmp_path / "site.css"
    path.write_text("body { margin: 0; }\n")
    return path


@pytest.fixture()
def fake_runner() -> MagicMock:
    """ProcessRunner stand-in that exits in time with no diagnostics."""
    runner = MagicMock(spec=ProcessRunner)
    runner.run.return_value = InvocationResult(
        exited_in_time=True, diagnostics="", exit_code=0
    )
    return runner
