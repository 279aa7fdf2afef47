# file-merge/conftest.py
"""
Pytest-wide fixtures for the entire project.
"""

import os
from pathlib import Path
from typing import Callable, Dict, Optional, Union

import pytest

from file_merge.config import ENV_PREFIX


# ────────────────────────────────────────────────────────────────────────────────
# 1.  Isolate every test from the caller's FILE_MERGE_* settings and .env files
# ────────────────────────────────────────────────────────────────────────────────
@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch, tmp_path: Path):
    for key in list(os.environ):
        if key.startswith(ENV_PREFIX):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)


# ────────────────────────────────────────────────────────────────────────────────
# 2.  Factory that populates a directory with named files
# ────────────────────────────────────────────────────────────────────────────────
@pytest.fixture
def make_files(tmp_path: Path) -> Callable[..., Path]:
    """
    Returns a helper that writes `{name: content}` into a directory (default:
    `tmp_path / "target"`) and returns that directory.
    """

    def _make(files: Dict[str, Union[str, bytes]], directory: Optional[Path] = None) -> Path:
        target = directory or tmp_path / "target"
        target.mkdir(parents=True, exist_ok=True)
        for name, content in files.items():
            path = target / name
            if isinstance(content, bytes):
                path.write_bytes(content)
            else:
                path.write_bytes(content.encode("utf-8"))
        return target

    return _make
