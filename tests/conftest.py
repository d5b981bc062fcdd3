from pathlib import Path

import pytest


@pytest.fixture
def write_log(tmp_path):
    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path
    return _write
