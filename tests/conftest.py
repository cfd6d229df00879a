import os
import sys
from pathlib import Path

import pytest

# Ensure the src directory is on the path for imports
root = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(root / 'src'))

log_dir = root / "logs"
log_dir.mkdir(parents=True, exist_ok=True)
os.environ.setdefault("MATRIXUTIL_LOG_DIR", str(log_dir))
os.environ.setdefault("MATRIXUTIL_CONFIG_DIR", str(root / "logs" / "config"))


@pytest.fixture(autouse=True)
def _isolated_log_config(tmp_path, monkeypatch):
    """Keep persisted settings written by a test out of every other test."""

    monkeypatch.setenv("MATRIXUTIL_LOG_CONFIG", str(tmp_path / "config" / "logging.json"))
