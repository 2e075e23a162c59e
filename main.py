"""Repository-level entrypoint for the capargs demo program."""

from __future__ import annotations

import sys
from typing import Sequence


def main(argv: Sequence[str] | None = None) -> int:
    from capargs.cli import main as cli_main

    args = list(argv) if argv is not None else sys.argv[1:]
    return cli_main(args)


if __name__ == "__main__":
    raise SystemExit(main())
