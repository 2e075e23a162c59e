"""Small command-line argument parser with one level of sub-commands.

Declare sub-commands and flags on a :class:`Cap`, call :meth:`Cap.parse`,
then ask which flags were present, what value each one picked up and which
sub-command (if any) was invoked.
"""

from __future__ import annotations

from .config import CapConfig, get_runtime_config, reload_config
from .context import Cap, cap_deinit, cap_init
from .errors import (
    AllocationError,
    CapError,
    DuplicateNameError,
    NoArgumentsError,
    NotFoundError,
)
from .flags import Flag, FlagRegistry
from .logs import enable_debug_logging
from .parser import parse_args
from .rawargs import RawArgs
from .registry import DEFAULT_CAPACITY, Registry
from .subcommands import Subcommand, SubcommandRegistry
from .version import __version__

__all__ = [
    "AllocationError",
    "Cap",
    "CapConfig",
    "CapError",
    "DEFAULT_CAPACITY",
    "DuplicateNameError",
    "Flag",
    "FlagRegistry",
    "NoArgumentsError",
    "NotFoundError",
    "RawArgs",
    "Registry",
    "Subcommand",
    "SubcommandRegistry",
    "__version__",
    "cap_deinit",
    "cap_init",
    "enable_debug_logging",
    "get_runtime_config",
    "parse_args",
    "reload_config",
]
