import pytest

from sqlrewrite.matcher import NO_MATCH, MatchResult, find
from sqlrewrite.pattern import compile_pattern


def test_find_literal_pattern():
    match = find("SELECT GETDATE() FROM t", compile_pattern("getdate()"))

    assert match == MatchResult(7, 16, {})


def test_find_leftmost():
    match = find("foo bar foo", compile_pattern("foo"))

    assert (match.start, match.end) == (0, 3)


def test_case_insensitive_match_case_preserving_capture():
    text = "CREATE TABLE Foo (id INT)"
    match = find(text, compile_pattern("create table @name ("))

    assert match.start == 0
    assert match.end == 18
    assert match.bindings == {"@name": " Foo "}
    assert match.bindings["@name"].strip() == "Foo"


def test_capture_preserves_comments_and_whitespace():
    text = "select x /* from */\n from t"
    match = find(text, compile_pattern("select @a from"))

    assert match.bindings == {"@a": " x /* from */\n "}


def test_capture_skips_nested_parentheses():
    text = "select f(a, b), c from t"
    match = find(text, compile_pattern("select @cols from"))

    assert match.bindings["@cols"] == " f(a, b), c "


def test_terminator_inside_parentheses_is_ignored():
    text = "select extract(year from d) from t"
    match = find(text, compile_pattern("select @cols from"))

    assert match.bindings["@cols"] == " extract(year from d) "
    assert text[match.end - 4 : match.end] == "from"


def test_capture_skips_quoted_literals():
    text = "where x = 'a and b' and y = 1"
    match = find(text, compile_pattern("where x = @val and"))

    assert match.bindings == {"@val": " 'a and b' "}
    assert match.end == 23


def test_capture_skips_double_quoted_identifiers():
    text = 'select "from" from t'
    match = find(text, compile_pattern("select @a from"))

    assert match.bindings == {"@a": ' "from" '}


def test_parenthesis_inside_quotes_is_ignored():
    text = "f(g('x)'), 1) + 2"
    match = find(text, compile_pattern("f(@a)"))

    assert match == MatchResult(0, 13, {"@a": "g('x)'), 1"})


def test_closing_parenthesis_without_opening_is_captured():
    match = find("select a) from t", compile_pattern("select @a from"))

    assert match.bindings == {"@a": " a) "}


def test_unclosed_parenthesis_never_terminates():
    assert find("select (a from t", compile_pattern("select @a from")) is NO_MATCH


def test_multiple_variables():
    text = "SELECT ISNULL(MyCol, 'N/A') FROM t"
    match = find(text, compile_pattern("isnull(@a,@b)"))

    assert match.bindings == {"@a": "MyCol", "@b": " 'N/A'"}
    assert text[match.start : match.end] == "ISNULL(MyCol, 'N/A')"


def test_quote_as_terminator():
    match = find("OBJECT_ID('dbo.t', 'U')", compile_pattern("object_id('@a'"))

    assert match.bindings == {"@a": "dbo.t"}


def test_abandoned_attempt_keeps_latest_capture():
    text = "a 1 b d a 2 b c"
    match = find(text, compile_pattern("a @x b c"))

    assert match == MatchResult(8, 15, {"@x": " 2 "})


@pytest.mark.parametrize(
    "text, pattern",
    [
        ("select 1", "from"),
        ("", "select"),
        ("-- from t", "from"),
    ],
)
def test_no_match(text, pattern):
    assert find(text, compile_pattern(pattern)) is NO_MATCH


def test_no_match_sentinel_is_none():
    assert NO_MATCH is None


@pytest.mark.parametrize(
    "text, pattern",
    [
        ("a a b", "a b"),
        ("a a a b", "a a b"),
    ],
)
def test_no_backtracking_on_mismatch(text, pattern):
    # The mismatching token is never retried as the start of a new match.
    assert find(text, compile_pattern(pattern)) is NO_MATCH


def test_match_resumes_after_mismatching_token():
    match = find("a c a b", compile_pattern("a b"))

    assert (match.start, match.end) == (4, 7)


def test_consecutive_variables_never_terminate():
    # The terminator of @x is the text of the @y block itself.
    assert find("a 1 2 b", compile_pattern("a @x @y b")) is NO_MATCH
    match = find("a 1 @y b", compile_pattern("a @x @y b"))
    assert match.bindings == {"@x": " 1 "}


def test_literals_are_matched_inside_quotes():
    # Quotes are only tracked while capturing a variable.
    match = find("select 'from'", compile_pattern("from"))

    assert (match.start, match.end) == (8, 12)


@pytest.mark.parametrize(
    "text, pattern",
    [
        ("İ ΟΔΟΣ ;", "ΟΔΟΣ ;"),
        ("ΟΔΟΣ ;", "ΟΔΟΣ ;"),
        ("SELECT ΟΔΟΣ", "select οδοσ"),
    ],
)
def test_non_ascii_match_does_not_depend_on_other_characters(text, pattern):
    match = find(text, compile_pattern(pattern))

    assert match is not None
    assert match.end == len(text)


def test_repeated_variable_keeps_latest_capture():
    match = find("a 1 b 2 c", compile_pattern("a @x b @x c"))

    assert match == MatchResult(0, 9, {"@x": " 2 "})
