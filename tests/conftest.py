"""
Shared test configuration.
These tests are executed by `pytest` and must remain deterministic: the
environment and working directory are isolated so no local `.env` leaks in.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

SRC_DIR = Path(__file__).resolve().parent.parent / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Drop project env vars and run from an empty directory."""

    for key in list(os.environ):
        if key.upper().startswith("TYPED_BASICS_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
