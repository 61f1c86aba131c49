import importlib
import io
import json
import logging
from contextlib import redirect_stdout
import suite
from suite import assert_that, raises
from setpartition import cli
from setpartition.cli import DriverConfig, format_grouping, run, main


def capture(config):
    out = io.StringIO()
    written = run(config, out=out)
    return written, out.getvalue().splitlines()


@suite.test("default driver prints ten text lines for 3:2")
def test_default_text():
    written, lines = capture(DriverConfig())
    assert_that(written == 10, "ten groupings written")
    assert_that(lines[0] == "(a b c) (d e)", "first line brackets each group")
    assert_that(lines[-1] == "(c d e) (a b)", "last line")


@suite.test("json output writes one array per line")
def test_json_output():
    _, lines = capture(DriverConfig(group_sizes=[1, 1, 1], output_format='json'))
    assert_that(len(lines) == 6, "six permutations")
    assert_that(json.loads(lines[0]) == [['a'], ['b'], ['c']], "first grouping as json")


@suite.test("count only and limit")
def test_count_and_limit():
    written, lines = capture(DriverConfig(count_only=True))
    assert_that(lines == ['10'] and written == 0, "count prints the total only")
    written, lines = capture(DriverConfig(limit=3))
    assert_that(written == 3 and len(lines) == 3, "limit stops early")


@suite.test("explicit elements get a synthetic group for the shortfall")
def test_explicit_elements():
    _, lines = capture(DriverConfig(group_sizes=[2], elements=['x', 'y', 'z']))
    assert_that(lines == ["(x y) (z)", "(x z) (y)", "(y z) (x)"], "shortfall group printed last")


@suite.test("format_grouping shows empty groups")
def test_format_empty_group():
    assert_that(format_grouping([['a'], []]) == "(a) ()", "empty group renders as ()")


@suite.test("importing the driver leaves root logging alone")
def test_import_keeps_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    importlib.reload(cli)
    assert_that(root.handlers == handlers, "no handlers added on import")
    assert_that(root.level == level, "root level unchanged on import")


@suite.test("main returns status codes")
def test_main():
    out = io.StringIO()
    with redirect_stdout(out):
        status = main(['2:1', '--output', 'json'])
    assert_that(status == 0, "successful run exits 0")
    assert_that(len(out.getvalue().splitlines()) == 3, "three groupings printed")

    assert_that(main(['3:3', '--elements', 'a,b']) == 2, "oversized sizes exit 2")
    assert_that(main(['3:x']) == 2, "malformed sizes exit 2")
    with raises(SystemExit):
        main(['--limit', '-1'])


# --- run the suite ---
if __name__ == "__main__":
    suite.main(title="setpartition cli test")
