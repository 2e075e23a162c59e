"""Demo command-line program built on capargs.

Registers a ``run`` sub-command with a ``file`` flag (and a root ``file``
flag), parses the given arguments and prints the raw arguments that
followed ``run``, one per line.
"""

from __future__ import annotations

import sys
from typing import List, Optional, Sequence

from .colors import color
from .context import Cap
from .errors import CapError, NoArgumentsError
from .logs import get_logger

__all__ = ["build_cap", "main"]

DEFAULT_PROG = "capargs-demo"

_LOGGER = get_logger("cli")


def build_cap(argv: Sequence[str]) -> Cap:
    """Return a context with the demo vocabulary registered on ``argv``."""
    cap = Cap(argv)
    cap.register_subcmd("run", "run a source file")
    cap.register_flag(None, "file", "file path")
    cap.register_flag(None, "verbose", "show every flag after parsing")
    cap.register_flag("run", "file", "file path")
    cap.register_flag("run", "verbose", "show every flag after parsing")
    return cap


def _print_flags(cap: Cap, scope: Optional[str]) -> None:
    label = scope or "<root>"
    print(color(f"Flags ({label}):", fg="yellow", bold=True))
    for flag in cap.flags(scope):
        state = color("provided", fg="green") if flag.provided else color("absent", fg="red")
        value = flag.value if flag.value is not None else "-"
        print(f"  {flag.name:<10} {state:<8} value: {value}")


def main(argv: Optional[List[str]] = None, *, prog: str = DEFAULT_PROG) -> int:
    """Run the demo; ``argv`` excludes the program name."""
    args = list(argv) if argv is not None else sys.argv[1:]
    with build_cap([prog, *args]) as cap:
        try:
            cap.parse()
        except NoArgumentsError as exc:
            print(color(f"{prog}: {exc}", fg="red"), file=sys.stderr)
            print(f"usage: {prog} run [--file PATH] [--verbose]", file=sys.stderr)
            return 1
        except CapError as exc:
            _LOGGER.error("Parsing failed: %s", exc)
            return 1

        run_args = cap.subcmd_rawargs("run")
        if run_args is not None:
            for arg in run_args:
                print(arg)

        scope = "run" if cap.subcmd_provided("run") else None
        if cap.flag_provided(scope, "verbose"):
            _print_flags(cap, scope)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
