"""Exception hierarchy for capargs."""

from __future__ import annotations

__all__ = [
    "CapError",
    "AllocationError",
    "NotFoundError",
    "NoArgumentsError",
    "DuplicateNameError",
]


class CapError(Exception):
    """Base class for every error raised by capargs."""


class AllocationError(CapError):
    """A descriptor or registry slot could not be allocated."""


class NotFoundError(CapError):
    """A flag was registered under a sub-command that does not exist."""

    def __init__(self, subcmd: str, name: str | None = None) -> None:
        self.subcmd = subcmd
        self.name = name
        message = f"unknown subcommand: {subcmd}"
        if name is not None:
            message += f" (while registering flag '{name}')"
        super().__init__(message)


class NoArgumentsError(CapError):
    """``parse`` was called with nothing after the program name."""

    def __init__(self, message: str = "No arguments provided") -> None:
        super().__init__(message)


class DuplicateNameError(CapError):
    """A name was registered twice in one scope while strict naming is on."""

    def __init__(self, kind: str, name: str, scope: str | None = None) -> None:
        self.kind = kind
        self.name = name
        self.scope = scope
        where = f" in scope '{scope}'" if scope else ""
        super().__init__(f"duplicate {kind} name{where}: {name}")
