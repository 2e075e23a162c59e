"""Sub-command descriptors and their registry."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from .errors import AllocationError, DuplicateNameError
from .flags import FlagRegistry
from .rawargs import RawArgs
from .registry import DEFAULT_CAPACITY, Registry

__all__ = ["Subcommand", "SubcommandRegistry"]

_LOGGER = logging.getLogger("capargs.subcommands")


@dataclass(slots=True)
class Subcommand:
    """One declared sub-command.

    ``flags`` is created the first time a flag is registered under this
    sub-command. ``raw_args`` stays ``None`` until the parser matches the
    sub-command, and then holds every token after it, including the ones
    that were also read as flags or flag values.
    """

    name: str
    help: str
    flags: Optional[FlagRegistry] = None
    raw_args: Optional[RawArgs] = None

    @classmethod
    def new(cls, name: str, help: str) -> "Subcommand":
        try:
            return cls(name=str(name), help=str(help))
        except MemoryError as exc:
            _LOGGER.error("Failed to allocate memory for new sub-command: %s", name)
            raise AllocationError(f"cannot allocate sub-command '{name}'") from exc


class SubcommandRegistry(Registry[Subcommand]):
    __slots__ = ("strict",)

    def __init__(self, capacity: int = DEFAULT_CAPACITY, *, strict: bool = False) -> None:
        super().__init__(capacity)
        self.strict = strict

    def register(self, name: str, help: str) -> Subcommand:
        if self.find(name) is not None:
            if self.strict:
                raise DuplicateNameError("sub-command", name)
            _LOGGER.warning("Sub-command '%s' registered twice; lookups return the first", name)
        subcmd = Subcommand.new(name, help)
        self.append(subcmd)
        return subcmd

    def find(self, name: str) -> Optional[Subcommand]:
        return self.find_by(lambda subcmd: subcmd.name == name)
