"""
Pytest configuration file.

Ensures the repo root is on sys.path so that 'import mathcustom...' works
without installing the package, and resets cached global state between tests.
"""
import sys
from pathlib import Path

import pytest

# Add the repo root to sys.path
repo_root = Path(__file__).parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from mathcustom.config import settings as settings_module  # noqa: E402
from mathcustom.random import sampling as sampling_module  # noqa: E402


@pytest.fixture(autouse=True)
def isolated_globals(monkeypatch):
    """Give every test fresh settings and a fresh default generator."""
    monkeypatch.delenv("MATHCUSTOM_SEED", raising=False)
    monkeypatch.delenv("MATHCUSTOM_LOG_LEVEL", raising=False)
    settings_module.reset_settings()
    monkeypatch.setattr(sampling_module, "_default_rng", None)
    yield
    settings_module.reset_settings()
