import sys
from pathlib import Path

import pytest


def _ensure_repo_root_on_path():
    """Allow tests to import project modules without installation."""
    repo_root = Path(__file__).resolve().parent.parent
    repo_str = str(repo_root)
    if repo_str not in sys.path:
        sys.path.insert(0, repo_str)


_ensure_repo_root_on_path()


@pytest.fixture(autouse=True)
def clear_flightcheck_env(monkeypatch):
    """Ensure each test starts without flightcheck-specific environment variables."""
    for name in ("FLIGHTCHECK_STRICT_GRAMMAR", "FLIGHTCHECK_REQUIRE_DEFINITIONS", "FLIGHTCHECK_ENCODING", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
