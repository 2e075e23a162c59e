"""The parser context: program name, working arguments and every registry.

Typical use::

    with Cap(sys.argv) as cap:
        cap.register_subcmd("run", "run a source file")
        cap.register_flag("run", "file", "file path")
        cap.parse()
        path = cap.flag_value("run", "file")

Registration happens before ``parse``; queries may happen any number of
times afterwards. Nothing here is thread-safe.
"""

from __future__ import annotations

import logging
from typing import Iterator, Optional, Sequence

from .config import CapConfig, get_runtime_config
from .errors import AllocationError, CapError, NotFoundError
from .flags import Flag, FlagRegistry
from .logs import enable_debug_logging
from .parser import parse_args
from .rawargs import RawArgs
from .subcommands import Subcommand, SubcommandRegistry

__all__ = ["Cap", "cap_init", "cap_deinit"]

_LOGGER = logging.getLogger("capargs.context")


class Cap:
    """Owns every registry for one invocation of the host program."""

    def __init__(self, argv: Sequence[str], *, config: Optional[CapConfig] = None) -> None:
        self.config = config if config is not None else get_runtime_config()
        if self.config.debug:
            enable_debug_logging()
        tokens = tuple(argv)
        self.prog: str = tokens[0] if tokens else ""
        # Program name stripped; empty when only argv[0] was given.
        self.argv = RawArgs(tokens, 1)
        self.subcmd: Optional[Subcommand] = None
        self.sub_cmds: Optional[SubcommandRegistry] = None
        self.m_flags: Optional[FlagRegistry] = None
        self._closed = False

    # -- lifecycle -----------------------------------------------------

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        """Release every registry; safe to call more than once."""
        if self._closed:
            return
        if self.sub_cmds is not None:
            for subcmd in self.sub_cmds:
                subcmd.flags = None
                subcmd.raw_args = None
        self.sub_cmds = None
        self.m_flags = None
        self.subcmd = None
        self._closed = True
        _LOGGER.debug("Released parser context for %s", self.prog or "<unnamed>")

    def __enter__(self) -> "Cap":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _check_open(self) -> None:
        if self._closed:
            raise CapError("parser context has already been released")

    # -- registration --------------------------------------------------

    def register_subcmd(self, name: str, help: str) -> Subcommand:
        self._check_open()
        if self.sub_cmds is None:
            self.sub_cmds = self._new_registry(
                SubcommandRegistry, "sub-command list"
            )
        return self.sub_cmds.register(name, help)

    def register_flag(self, subcmd: Optional[str], name: str, help: str) -> Flag:
        """Register flag ``name`` at the root (``subcmd=None``) or under ``subcmd``."""
        self._check_open()
        if subcmd is None:
            if self.m_flags is None:
                self.m_flags = self._new_registry(FlagRegistry, "flag list")
            return self.m_flags.register(name, help)

        sc = self.find_subcmd(subcmd)
        if sc is None:
            _LOGGER.error(
                "Sub-command not found in registered sub-commands: %s (flag: %s)",
                subcmd,
                name,
            )
            raise NotFoundError(subcmd, name)
        if sc.flags is None:
            sc.flags = self._new_registry(FlagRegistry, "flag list", scope=sc.name)
        return sc.flags.register(name, help)

    def _new_registry(self, factory, what: str, **kwargs):
        try:
            return factory(
                self.config.initial_capacity,
                strict=self.config.strict_names,
                **kwargs,
            )
        except MemoryError as exc:
            _LOGGER.error("Failed to allocate memory for new %s", what)
            raise AllocationError(f"cannot allocate {what}") from exc

    # -- parsing -------------------------------------------------------

    def parse(self) -> None:
        self._check_open()
        parse_args(self)

    # -- queries -------------------------------------------------------

    def find_subcmd(self, name: str) -> Optional[Subcommand]:
        if self.sub_cmds is None:
            return None
        return self.sub_cmds.find(name)

    def _flag_registry(self, subcmd: Optional[str]) -> Optional[FlagRegistry]:
        if subcmd is None:
            return self.m_flags
        sc = self.find_subcmd(subcmd)
        if sc is None:
            _LOGGER.debug("Sub-command not found in registered sub-commands: %s", subcmd)
            return None
        return sc.flags

    def _find_flag(self, subcmd: Optional[str], name: str) -> Optional[Flag]:
        self._check_open()
        registry = self._flag_registry(subcmd)
        if registry is None:
            return None
        flag = registry.find(name)
        if flag is None:
            _LOGGER.debug("Flag not found in registered flags list: %s", name)
        return flag

    def flag_value(self, subcmd: Optional[str], name: str) -> Optional[str]:
        flag = self._find_flag(subcmd, name)
        return flag.value if flag is not None else None

    def flag_provided(self, subcmd: Optional[str], name: str) -> bool:
        flag = self._find_flag(subcmd, name)
        return flag.provided if flag is not None else False

    def subcmd_provided(self, name: str) -> bool:
        self._check_open()
        return self.subcmd is not None and self.subcmd.name == name

    def subcmd_rawargs(self, name: str) -> Optional[RawArgs]:
        """Tokens after the matched sub-command, or ``None`` if it never matched."""
        self._check_open()
        sc = self.find_subcmd(name)
        return sc.raw_args if sc is not None else None

    def flags(self, subcmd: Optional[str] = None) -> Iterator[Flag]:
        self._check_open()
        registry = self._flag_registry(subcmd)
        return iter(registry) if registry is not None else iter(())

    def subcommands(self) -> Iterator[Subcommand]:
        self._check_open()
        return iter(self.sub_cmds) if self.sub_cmds is not None else iter(())

    def __repr__(self) -> str:
        state = "closed" if self._closed else f"argc={self.argv.argc}"
        return f"Cap(prog={self.prog!r}, {state})"


def cap_init(argv: Sequence[str], *, config: Optional[CapConfig] = None) -> Cap:
    try:
        return Cap(argv, config=config)
    except MemoryError as exc:
        _LOGGER.error("Failed to initialize cap")
        raise AllocationError("cannot allocate parser context") from exc


def cap_deinit(cap: Optional[Cap]) -> None:
    if cap is not None:
        cap.close()
