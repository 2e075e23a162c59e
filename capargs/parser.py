"""Single-pass argument scanner.

The first token decides the scope: when it does not start with ``-`` it is
taken as a sub-command name and consumed, whether or not such a
sub-command exists. An unknown name leaves the root flags in effect.

The remaining tokens are then visited once, in order. A token starting
with ``-`` is looked up (leading dashes removed) in the active flag list
and marked as provided; if the next token does not start with ``-`` it
becomes the flag's value. The next token is still visited on its own, so
a value is never skipped over, it just triggers nothing.

Unknown sub-commands and flags are logged and otherwise ignored.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .errors import NoArgumentsError

if TYPE_CHECKING:  # pragma: no cover
    from .context import Cap

__all__ = ["parse_args", "is_flag_token", "strip_dashes"]

_LOGGER = logging.getLogger("capargs.parser")


def is_flag_token(token: str) -> bool:
    return token.startswith("-")


def strip_dashes(token: str) -> str:
    """Remove every leading dash: ``--file`` and ``-file`` both give ``file``."""
    return token.lstrip("-")


def parse_args(cap: "Cap") -> None:
    argv = cap.argv
    if argv.argc == 0:
        _LOGGER.error("No arguments provided")
        raise NoArgumentsError()

    sc = None
    first = argv[0]
    if not is_flag_token(first):
        argv = argv.advance()
        sc = cap.find_subcmd(first)
        if sc is None:
            _LOGGER.warning("Invalid sub-command: %s", first)
        else:
            cap.subcmd = sc
            sc.raw_args = argv

    flist = sc.flags if sc is not None else cap.m_flags
    if not flist:
        _LOGGER.info("No flags registered in this flag list; nothing to parse")
        return

    for idx, token in enumerate(argv):
        if not is_flag_token(token):
            continue
        flag = flist.find(strip_dashes(token))
        if flag is None:
            _LOGGER.warning("Invalid flag: %s", token)
            continue
        flag.provided = True
        next_arg = argv.get(idx + 1)
        if next_arg is not None:
            flag.value = None if is_flag_token(next_arg) else next_arg
