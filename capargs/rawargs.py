"""Read-only views over the process argument vector."""

from __future__ import annotations

from typing import Any, Iterator, Sequence, Tuple, Union, overload

__all__ = ["RawArgs"]


class RawArgs(Sequence[str]):
    """A window onto ``argv[start:]`` that never copies the tokens.

    Every view created from the same vector shares the underlying tuple, so
    a token read through a view is the identical ``str`` object the caller
    passed in.
    """

    __slots__ = ("_argv", "_start")

    def __init__(self, argv: Tuple[str, ...], start: int = 0) -> None:
        self._argv = argv
        self._start = min(max(start, 0), len(argv))

    @property
    def argc(self) -> int:
        return len(self._argv) - self._start

    def advance(self, count: int = 1) -> "RawArgs":
        """Return a view that starts ``count`` tokens further along."""
        return RawArgs(self._argv, self._start + count)

    def get(self, idx: int) -> str | None:
        """Bounds-checked access; ``None`` outside ``0 <= idx < argc``."""
        if 0 <= idx < self.argc:
            return self._argv[self._start + idx]
        return None

    @overload
    def __getitem__(self, idx: int) -> str: ...

    @overload
    def __getitem__(self, idx: slice) -> Tuple[str, ...]: ...

    def __getitem__(self, idx: Union[int, slice]) -> Union[str, Tuple[str, ...]]:
        if isinstance(idx, slice):
            return self._argv[self._start:][idx]
        if idx < 0:
            idx += self.argc
        if not 0 <= idx < self.argc:
            raise IndexError("raw argument index out of range")
        return self._argv[self._start + idx]

    def __len__(self) -> int:
        return self.argc

    def __iter__(self) -> Iterator[str]:
        for idx in range(self._start, len(self._argv)):
            yield self._argv[idx]

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, RawArgs):
            return tuple(self) == tuple(other)
        if isinstance(other, (list, tuple)):
            return tuple(self) == tuple(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(tuple(self))

    def __repr__(self) -> str:
        return f"RawArgs({list(self)!r})"
