"""Shared test fixtures."""

import pytest


@pytest.fixture
def beats_file(tmp_path):
    """Write beat-list content to a temp file and return its path."""

    def _write(content: str, name: str = "in.txt"):
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write
