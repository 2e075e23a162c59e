"""Ensure project root is on sys.path for test imports."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from capargs.config import get_runtime_config  # noqa: E402
from capargs.logs import disable_debug_logging  # noqa: E402


@pytest.fixture(autouse=True)
def _capargs_env_defaults(monkeypatch):
    """Start every test from default configuration with no debug handler."""

    for key in ("CAPARGS_CONFIG", "CAPARGS_INITIAL_CAPACITY", "CAPARGS_STRICT", "CAPARGS_DEBUG"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("NO_COLOR", "1")
    get_runtime_config.cache_clear()
    yield
    get_runtime_config.cache_clear()
    disable_debug_logging()
    logging.getLogger("capargs").setLevel(logging.NOTSET)
