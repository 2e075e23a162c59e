from __future__ import annotations

import logging

import pytest

from capargs import Cap, NoArgumentsError
from capargs.parser import is_flag_token, parse_args, strip_dashes


def _demo_cap(argv):
    cap = Cap(argv)
    cap.register_subcmd("run", "run a source file")
    cap.register_flag(None, "file", "file path")
    cap.register_flag("run", "file", "file path")
    return cap


def test_strip_dashes_removes_every_leading_dash() -> None:
    assert strip_dashes("--file") == "file"
    assert strip_dashes("-f") == "f"
    assert strip_dashes("---x-y") == "x-y"
    assert strip_dashes("-") == ""
    assert is_flag_token("-x")
    assert not is_flag_token("x-")


def test_no_arguments_fails() -> None:
    cap = _demo_cap(["prog"])
    with pytest.raises(NoArgumentsError):
        cap.parse()
    assert cap.subcmd is None
    assert not cap.closed


def test_empty_argv_fails_on_parse() -> None:
    cap = Cap([])
    assert cap.prog == ""
    with pytest.raises(NoArgumentsError):
        parse_args(cap)


def test_subcommand_with_flag_value() -> None:
    cap = _demo_cap(["prog", "run", "--file", "a.txt"])
    cap.parse()
    assert cap.subcmd_provided("run") is True
    assert cap.flag_value("run", "file") == "a.txt"
    assert cap.flag_provided("run", "file") is True
    assert cap.subcmd_rawargs("run") == ["--file", "a.txt"]
    # Root scope is untouched when a sub-command matched.
    assert cap.flag_provided(None, "file") is False


def test_root_flag_without_subcommands() -> None:
    cap = Cap(["prog", "--verbose"])
    cap.register_flag(None, "verbose", "noisy")
    cap.parse()
    assert cap.flag_provided(None, "verbose") is True
    assert cap.flag_value(None, "verbose") is None
    assert cap.subcmd_provided("verbose") is False
    assert cap.subcmd_provided("run") is False
    assert cap.subcmd is None


def test_value_is_the_original_token_object() -> None:
    value = "".join(["a", ".txt"])
    cap = _demo_cap(["prog", "--file", value])
    cap.parse()
    assert cap.flag_value(None, "file") is value


def test_flag_followed_by_flag_has_no_value() -> None:
    cap = Cap(["prog", "--a", "--b", "x"])
    cap.register_flag(None, "a", "")
    cap.register_flag(None, "b", "")
    cap.parse()
    assert cap.flag_provided(None, "a") is True
    assert cap.flag_value(None, "a") is None
    assert cap.flag_value(None, "b") == "x"


def test_flag_at_end_of_input_has_no_value() -> None:
    cap = Cap(["prog", "--x", "1", "--y"])
    cap.register_flag(None, "x", "")
    cap.register_flag(None, "y", "")
    cap.parse()
    assert cap.flag_value(None, "x") == "1"
    assert cap.flag_provided(None, "y") is True
    assert cap.flag_value(None, "y") is None


def test_value_token_is_visited_but_not_skipped() -> None:
    # "--b" follows a value token and is still recognised.
    cap = Cap(["prog", "--a", "v", "--b"])
    cap.register_flag(None, "a", "")
    cap.register_flag(None, "b", "")
    cap.parse()
    assert cap.flag_value(None, "a") == "v"
    assert cap.flag_provided(None, "b") is True


def test_single_and_double_dashes_are_equivalent() -> None:
    cap = Cap(["prog", "-a", "1", "---b", "2"])
    cap.register_flag(None, "a", "")
    cap.register_flag(None, "b", "")
    cap.parse()
    assert cap.flag_value(None, "a") == "1"
    assert cap.flag_value(None, "b") == "2"


def test_unregistered_flags_are_never_provided() -> None:
    cap = Cap(["prog", "--a", "1"])
    cap.register_flag(None, "a", "")
    cap.register_flag(None, "b", "")
    cap.parse()
    assert cap.flag_provided(None, "b") is False
    assert cap.flag_value(None, "b") is None


def test_unknown_flag_is_a_warning(caplog: pytest.LogCaptureFixture) -> None:
    cap = Cap(["prog", "--nope", "--a", "v"])
    cap.register_flag(None, "a", "")
    with caplog.at_level(logging.WARNING, logger="capargs.parser"):
        cap.parse()
    assert "Invalid flag: --nope" in caplog.text
    assert cap.flag_value(None, "a") == "v"


def test_unknown_leading_token_is_consumed_and_root_scope_used(
    caplog: pytest.LogCaptureFixture,
) -> None:
    cap = _demo_cap(["prog", "build", "--file", "x.c"])
    with caplog.at_level(logging.WARNING, logger="capargs.parser"):
        cap.parse()
    assert "Invalid sub-command: build" in caplog.text
    assert cap.subcmd is None
    assert cap.subcmd_provided("build") is False
    assert cap.subcmd_provided("run") is False
    assert cap.subcmd_rawargs("run") is None
    assert cap.flag_value(None, "file") == "x.c"


def test_unknown_leading_token_is_not_a_value() -> None:
    # The consumed token never becomes a positional value for anything.
    cap = Cap(["prog", "input.txt"])
    cap.register_flag(None, "file", "")
    cap.parse()
    assert cap.flag_provided(None, "file") is False
    assert cap.flag_value(None, "file") is None


def test_subcommand_flag_scope_ignores_root_flags() -> None:
    cap = Cap(["prog", "run", "--verbose", "--file", "a"])
    cap.register_subcmd("run", "")
    cap.register_flag(None, "verbose", "")
    cap.register_flag("run", "file", "")
    cap.parse()
    assert cap.flag_provided(None, "verbose") is False
    assert cap.flag_provided("run", "verbose") is False
    assert cap.flag_value("run", "file") == "a"


def test_raw_args_include_tokens_read_as_flags() -> None:
    cap = _demo_cap(["prog", "run", "main.c", "--file", "a", "--other"])
    cap.parse()
    raw = cap.subcmd_rawargs("run")
    assert list(raw) == ["main.c", "--file", "a", "--other"]


def test_matched_subcommand_without_flags_still_records_raw_args() -> None:
    cap = Cap(["prog", "run", "--file", "a"])
    cap.register_subcmd("run", "")
    cap.register_flag(None, "file", "")
    cap.parse()
    assert cap.subcmd_provided("run") is True
    assert cap.subcmd_rawargs("run") == ["--file", "a"]
    assert cap.flag_provided(None, "file") is False


def test_subcommand_alone_yields_empty_raw_args() -> None:
    cap = _demo_cap(["prog", "run"])
    cap.parse()
    raw = cap.subcmd_rawargs("run")
    assert raw is not None
    assert len(raw) == 0


def test_registered_but_unmatched_subcommand_has_no_raw_args() -> None:
    cap = _demo_cap(["prog", "--file", "a"])
    cap.register_subcmd("build", "")
    cap.parse()
    assert cap.subcmd_rawargs("run") is None
    assert cap.subcmd_rawargs("build") is None


def test_no_flags_registered_is_success(caplog: pytest.LogCaptureFixture) -> None:
    cap = Cap(["prog", "--a", "b"])
    with caplog.at_level(logging.INFO, logger="capargs.parser"):
        cap.parse()
    assert "nothing to parse" in caplog.text


def test_duplicate_flag_name_only_first_is_set() -> None:
    cap = Cap(["prog", "--a", "1"])
    first = cap.register_flag(None, "a", "first")
    second = cap.register_flag(None, "a", "second")
    cap.parse()
    assert first.provided and first.value == "1"
    assert not second.provided and second.value is None


def test_first_matching_subcommand_wins() -> None:
    cap = Cap(["prog", "run", "--x", "1"])
    first = cap.register_subcmd("run", "first")
    cap.register_subcmd("run", "second")
    cap.register_flag("run", "x", "")
    cap.parse()
    assert cap.subcmd is first
    assert cap.flag_value("run", "x") == "1"


def test_empty_leading_token_is_treated_as_subcommand_candidate() -> None:
    cap = Cap(["prog", "", "--a", "v"])
    cap.register_flag(None, "a", "")
    cap.parse()
    assert cap.subcmd is None
    assert cap.flag_value(None, "a") == "v"


def test_repeated_flag_at_end_keeps_earlier_value() -> None:
    cap = Cap(["prog", "--f", "a", "--f"])
    cap.register_flag(None, "f", "")
    cap.parse()
    assert cap.flag_provided(None, "f") is True
    assert cap.flag_value(None, "f") == "a"


def test_repeated_flag_followed_by_flag_clears_value() -> None:
    cap = Cap(["prog", "--f", "a", "--f", "--g"])
    cap.register_flag(None, "f", "")
    cap.register_flag(None, "g", "")
    cap.parse()
    assert cap.flag_value(None, "f") is None
