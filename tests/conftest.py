"""
Pytest configuration and fixtures.
Adds src/ to sys.path so `import core` / `import adapters` work without an install.
"""

import os
import sys
from pathlib import Path

import pytest
from loguru import logger

project_root = Path(__file__).parent.parent
src_root = project_root / "src"
if str(src_root) not in sys.path:
    sys.path.insert(0, str(src_root))


@pytest.fixture
def log_records():
    """Collect loguru messages emitted during a test as (level, message) pairs."""

    records = []
    sink_id = logger.add(
        lambda message: records.append((message.record["level"].name, message.record["message"])),
        level="DEBUG",
    )
    yield records
    logger.remove(sink_id)


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch, tmp_path):
    """Keep PATTERNS_* variables and stray .env files out of every test."""

    for name in list(os.environ):
        if name.upper().startswith("PATTERNS_"):
            monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
