"""Runtime configuration loader for capargs."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Iterable, Optional

from .registry import DEFAULT_CAPACITY

__all__ = [
    "CapConfig",
    "get_runtime_config",
    "reload_config",
]

_CONFIG_ENV = "CAPARGS_CONFIG"
_CAPACITY_ENV = "CAPARGS_INITIAL_CAPACITY"
_STRICT_ENV = "CAPARGS_STRICT"
_DEBUG_ENV = "CAPARGS_DEBUG"

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}


def _as_bool(raw: Any, default: bool) -> bool:
    if isinstance(raw, bool):
        return raw
    if raw is None:
        return default
    text = str(raw).strip().lower()
    if text in _TRUTHY:
        return True
    if text in _FALSY:
        return False
    return default


def _as_capacity(raw: Any, default: int) -> int:
    try:
        value = int(str(raw).strip())
    except (TypeError, ValueError):
        return default
    return value if value > 0 else default


@dataclass(slots=True)
class CapConfig:
    initial_capacity: int = DEFAULT_CAPACITY
    strict_names: bool = False
    debug: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CapConfig":
        if not isinstance(data, dict):
            return cls()
        return cls(
            initial_capacity=_as_capacity(data.get("initial_capacity"), DEFAULT_CAPACITY),
            strict_names=_as_bool(data.get("strict_names"), False),
            debug=_as_bool(data.get("debug"), False),
        )

    def with_env_overrides(self) -> "CapConfig":
        """Return a copy with any ``CAPARGS_*`` environment overrides applied."""

        return CapConfig(
            initial_capacity=_as_capacity(os.getenv(_CAPACITY_ENV), self.initial_capacity),
            strict_names=_as_bool(os.getenv(_STRICT_ENV), self.strict_names),
            debug=_as_bool(os.getenv(_DEBUG_ENV), self.debug),
        )


def _candidate_paths(explicit: Optional[Path]) -> Iterable[Path]:
    if explicit is not None:
        yield explicit
    env_path = os.getenv(_CONFIG_ENV)
    if env_path:
        yield Path(env_path).expanduser()


def _load_config(path: Optional[Path] = None) -> CapConfig:
    base = CapConfig()
    for candidate in _candidate_paths(path):
        try:
            if candidate.exists():
                data = json.loads(candidate.read_text(encoding="utf-8"))
                if isinstance(data, dict):
                    base = CapConfig.from_dict(data)
                    break
        except (OSError, ValueError):
            continue
    return base.with_env_overrides()


@lru_cache(maxsize=1)
def get_runtime_config() -> CapConfig:
    """Return the cached runtime configuration."""

    return _load_config(None)


def reload_config(path: Optional[Path] = None) -> CapConfig:
    """Reload configuration, bypassing the cache."""

    get_runtime_config.cache_clear()
    return get_runtime_config() if path is None else _load_config(path)
