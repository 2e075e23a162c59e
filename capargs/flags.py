"""Flag descriptors and the per-scope registry that holds them."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from .errors import AllocationError, DuplicateNameError
from .registry import DEFAULT_CAPACITY, Registry

__all__ = ["Flag", "FlagRegistry"]

_LOGGER = logging.getLogger("capargs.flags")


@dataclass(slots=True)
class Flag:
    name: str
    help: str
    provided: bool = False
    # Same str object as the token in argv; never copied.
    value: Optional[str] = None

    @classmethod
    def new(cls, name: str, help: str) -> "Flag":
        try:
            return cls(name=str(name), help=str(help))
        except MemoryError as exc:
            _LOGGER.error("Failed to allocate memory for new flag: %s", name)
            raise AllocationError(f"cannot allocate flag '{name}'") from exc


class FlagRegistry(Registry[Flag]):
    """Flags of one scope: the program root or a single sub-command."""

    __slots__ = ("scope", "strict")

    def __init__(
        self,
        capacity: int = DEFAULT_CAPACITY,
        *,
        scope: Optional[str] = None,
        strict: bool = False,
    ) -> None:
        super().__init__(capacity)
        self.scope = scope
        self.strict = strict

    def register(self, name: str, help: str) -> Flag:
        if self.find(name) is not None:
            if self.strict:
                raise DuplicateNameError("flag", name, self.scope)
            _LOGGER.warning(
                "Flag '%s' registered twice in scope %s; lookups return the first",
                name,
                self.scope or "<root>",
            )
        flag = Flag.new(name, help)
        self.append(flag)
        return flag

    def find(self, name: str) -> Optional[Flag]:
        return self.find_by(lambda flag: flag.name == name)
