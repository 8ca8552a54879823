"""
Shared pytest fixtures.
"""
import os
import sys
from pathlib import Path

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir():
    """Directory holding the static example scripts."""
    return FIXTURES


@pytest.fixture
def write_script(tmp_path):
    """Return a helper that writes a file below tmp_path and returns its path."""
    def write(relative, text):
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding='utf-8')
        return path
    return write
