import io

import pytest

from slstatus.cli import Options, build_status, main, parse_args, run
from slstatus.registry import Arg

USAGE = "usage: slstatus [-v] [-s] [-1]"


def test_no_arguments():
    assert parse_args([]) == Options(status_only=False, once=False)


def test_s_flag():
    assert parse_args(["-s"]) == Options(status_only=True, once=False)


def test_one_flag_implies_status_only():
    assert parse_args(["-1"]) == Options(status_only=True, once=True)


def test_combined_flags():
    assert parse_args(["-s1"]) == Options(status_only=True, once=True)


def test_double_dash_ends_options():
    assert parse_args(["--"]) == Options()


@pytest.mark.parametrize("argv", [["-x"], ["extra"], ["--", "extra"], ["-s", "extra"], ["-"]])
def test_usage_errors(argv):
    with pytest.raises(SystemExit) as info:
        parse_args(argv)
    assert info.value.code == USAGE


def test_version():
    with pytest.raises(SystemExit) as info:
        parse_args(["-v"])
    assert info.value.code == "slstatus-1.1"


def test_build_status_formats_values():
    args = [Arg(lambda a: a, "[%s]", "hi"), Arg(lambda a: a, " %s%%", "50")]
    assert build_status(args) == "[hi] 50%"


def test_build_status_uses_unknown_for_none():
    args = [Arg(lambda a: None, "<%s>")]
    assert build_status(args, unknown="n/a") == "<n/a>"


def test_build_status_keeps_empty_result():
    args = [Arg(lambda a: "", "<%s>")]
    assert build_status(args, unknown="n/a") == "<>"


def test_build_status_stops_before_overflow():
    args = [Arg(lambda a: a, "%s", "abc")] * 3
    result = build_status(args, maxlen=7)
    assert result == "abcabc"
    assert len(result) < 7


def test_build_status_passes_argument():
    seen = []
    args = [Arg(lambda a: seen.append(a) or "ok", "%s", "/home")]
    assert build_status(args) == "ok"
    assert seen == ["/home"]


def test_run_once_writes_one_line():
    out = io.StringIO()
    run(Options(status_only=True, once=True), [Arg(lambda a: a, "[%s]", "x")], 1000, out)
    assert out.getvalue() == "[x]\n"


def test_run_requires_status_only():
    with pytest.raises(SystemExit):
        run(Options(), [Arg(lambda a: a, "%s", "x")], 1000, io.StringIO())


def test_main_rejects_bad_flag():
    with pytest.raises(SystemExit) as info:
        main(["-x"])
    assert info.value.code == USAGE