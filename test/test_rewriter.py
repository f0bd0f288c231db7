import logging

import pytest

from sqlrewrite.pattern import compile_pattern
from sqlrewrite.rewriter import (
    RewriteLimitError,
    rewrite,
    rewrite_once,
    substitute,
)


def test_substitute():
    assert substitute("coalesce(@a,@b)", {"@a": "x", "@b": " 0"}) == "coalesce(x, 0)"


def test_substitute_all_occurrences():
    assert substitute("@a + @a", {"@a": "1"}) == "1 + 1"


def test_substitute_leaves_unbound_variables():
    assert substitute("@a @b", {"@a": "1"}) == "1 @b"


def test_rewrite_once_replaces_leftmost_only():
    assert rewrite_once("a a", compile_pattern("a"), "b") == "b a"


def test_rewrite_once_no_match():
    assert rewrite_once("select 1", compile_pattern("from"), "x") == "select 1"


def test_rewrite_replaces_all():
    assert rewrite("a a", compile_pattern("a"), "b") == "b b"


def test_rewrite_preserves_surrounding_text():
    text = "SELECT ISNULL(Name, 'unknown') FROM users -- ISNULL(a, b)"
    result = rewrite(text, compile_pattern("isnull(@a,@b)"), "COALESCE(@a,@b)")

    assert result == "SELECT COALESCE(Name, 'unknown') FROM users -- ISNULL(a, b)"


def test_rewrite_replaces_occurrences_produced_by_replacement():
    pattern = compile_pattern("(@a)")

    assert rewrite("SELECT ((1))", pattern, "@a") == "SELECT 1"


def test_rewrite_no_match():
    assert rewrite("", compile_pattern("a"), "b") == ""


def test_rewrite_limit():
    with pytest.raises(RewriteLimitError) as err:
        rewrite("a", compile_pattern("a"), "a", max_iterations=10)

    assert err.value.pattern == "a"
    assert err.value.max_iterations == 10
    assert str(err.value) == "Pattern still matching after 10 replacements: a"


def test_rewrite_limit_not_hit_by_terminating_rules():
    pattern = compile_pattern("a")

    assert rewrite("a a a", pattern, "b", max_iterations=3) == "b b b"
    assert rewrite("c", pattern, "b", max_iterations=0) == "c"


def test_rewrite_logs_replacements(caplog):
    caplog.set_level(logging.DEBUG, logger="sqlrewrite.rewriter")

    rewrite("a a", compile_pattern("a"), "b")

    assert "Replacing 'a' at [0:1] with 'b'" in caplog.text
    assert "Pattern 'a' applied 2 times" in caplog.text


def test_rewrite_repeated_variable_uses_latest_capture():
    pattern = compile_pattern("a @x b @x c")

    assert rewrite("a 1 b 2 c", pattern, "f(@x)") == "f( 2 )"
