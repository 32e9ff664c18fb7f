from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture
def ini_file(tmp_path: Path) -> Path:
    path = tmp_path / "app.ini"
    path.write_text("[db]\nhost = localhost\nport = 5432\n\n[cache]\nttl = 60\n")
    return path
