"""Find the leftmost occurrence of a compiled pattern in SQL text.

The matcher walks the tokens of the text once, from left to right,
keeping a cursor on the pattern block it expects next.

When a **literal** block is expected, the current token must have the
same (lowercase) text, otherwise the match attempt is abandoned and the
cursor goes back to the first block of the pattern. The search then
continues from the token that follows the mismatching one, there is no
backtracking: for the pattern ``a a b`` the text ``a a a b`` is not
matched because the attempt started at the first ``a`` fails on the third
one and the third one is not retried as a new start.

When a **variable** block is expected, the matcher is capturing:
every token is absorbed into the variable until it finds the literal
block that follows the variable (its *terminator*). The terminator is
only recognized when the capture is not inside a quoted literal
or inside parentheses opened during the capture.
So given the pattern ``select @cols from`` and the text::

    SELECT f(a, 'from'), c FROM t

``@cols`` captures ``f(a, 'from'), c`` (with its surrounding whitespace)
as the ``from`` inside quotes doesn't terminate the capture.

Nesting is tracked with an explicit stack of the opened
``"``, ``'`` and ``(`` markers, so arbitrarily deep nesting in the text
has no impact on the Python call stack.

Matching compares the lowercase form of the tokens, but offsets and
captured values always refer to the original text, so
they retain the original casing and whitespace.
"""

from typing import NamedTuple

from .pattern import CompiledPattern
from .tokenize import lowercase, tokenize

QUOTES = ('"', "'")


class MatchResult(NamedTuple):
    """An occurrence of a pattern in a text.

    ``start`` and ``end`` delimit the matched span in the original text,
    ``bindings`` maps each variable name (like ``@table``) to the
    text it captured.
    """

    start: int
    end: int
    bindings: dict[str, str]


#: Returned by :func:`find` when the pattern does not occur in the text.
NO_MATCH = None


def find(text: str, pattern: CompiledPattern) -> MatchResult | None:
    """Find the leftmost occurrence of ``pattern`` in ``text``.

    >>> from sqlrewrite.pattern import compile_pattern
    >>> find("CREATE TABLE Foo;", compile_pattern("create table @name;"))
    MatchResult(start=0, end=17, bindings={'@name': ' Foo'})

    :param text: The text to search.
    :param pattern: The compiled search pattern.
    :returns: A :class:`MatchResult` or :data:`NO_MATCH` when
              the pattern can't be found.
    """
    tokens = tokenize(lowercase(text))
    match_count = 0
    match_start = 0
    var_start = 0
    nesting: list[str] = []
    bindings: dict[str, str] = {}

    for token in tokens:
        block = pattern[match_count]
        if block.is_variable:
            terminator = pattern[match_count + 1]
            if not nesting and token.text == terminator.text:
                bindings[block.text] = text[var_start : token.start]
                match_count += 2
                if match_count == len(pattern):
                    return MatchResult(match_start, token.end, bindings)
                elif pattern[match_count].is_variable:
                    var_start = token.end
            elif nesting and nesting[-1] in QUOTES:
                # Inside a quoted literal only the closing quote matters.
                if token.text == nesting[-1]:
                    nesting.pop()
            elif token.text in QUOTES or token.text == "(":
                nesting.append(token.text)
            elif token.text == ")" and nesting and nesting[-1] == "(":
                nesting.pop()
        elif token.text == block.text:
            if match_count == 0:
                match_start = token.start
            match_count += 1
            if match_count == len(pattern):
                return MatchResult(match_start, token.end, bindings)
            elif pattern[match_count].is_variable:
                var_start = token.end
        else:
            match_count = 0
            bindings = {}

    return NO_MATCH
