"""Split SQL text into a flat sequence of lexical tokens.

The tokenizer knows nothing about SQL grammar. It recognizes only
three things:

1. Runs of "word" characters: alphanumeric characters, ``_`` and ``@``.
   A run like ``my_table``, ``42`` or ``@schema`` becomes a single token.
2. Any other non whitespace character, which becomes a one character
   token on its own. Operators, punctuation, quotes and parentheses
   are all emitted this way, so ``>=`` is two tokens: ``>`` and ``=``.
3. Whitespace and comments, which produce no token at all.

Both SQL comment forms are recognized:
line comments from ``--`` up to the end of the line
and block comments from ``/*`` up to and including ``*/``.

Given ``"SELECT a.id -- the key\\nFROM t WHERE x>=@y"`` the tokenizer produces::

    [SELECT, a, ., id, FROM, t, WHERE, x, >, =, @y]

Each :class:`Token` carries the half-open ``[start, end)`` offsets
of its text inside the tokenized string, which is what allows the
:mod:`sqlrewrite.matcher` to slice captured text out of the original SQL.

Quoted literals are **not** recognized as single tokens,
a quote character is a token like any other and it's up to the
matcher to track whether it's inside a quoted span or not.
"""

from typing import NamedTuple


class Token(NamedTuple):
    """A token found in the source text.

    ``start`` and ``end`` are offsets into the exact text that
    was tokenized, ``text`` is always ``source[start:end]``.
    """

    start: int
    end: int
    text: str


class Tokenizer:
    """Tokenize a text into a list of :class:`Token`.

    The tokenizer performs a single left to right scan of the text,
    keeping track of where the currently accumulated run of word characters
    started and whether the scan is inside a comment.

    Tokenization never fails, any string (including the empty one)
    produces a possibly empty list of tokens.
    """

    def __init__(self, text: str) -> None:
        """
        :param text: The text to tokenize.
        """
        self.text = text
        self.tokens: list[Token] = []

    def tokenize(self) -> list[Token]:
        """Tokenize the text and return the list of tokens."""
        text = self.text
        self.tokens = []
        start = 0
        in_line_comment = False
        in_block_comment = False

        for cursor, char in enumerate(text):
            if in_line_comment:
                if char == "\n":
                    in_line_comment = False
                    start = cursor + 1
            elif in_block_comment:
                if char == "/" and cursor > 0 and text[cursor - 1] == "*":
                    in_block_comment = False
                    start = cursor + 1
            elif not self.is_word_char(char):
                self._emit(start, cursor)
                next_char = self._peek(cursor + 1)
                if char == "-" and next_char == "-":
                    in_line_comment = True
                elif char == "/" and next_char == "*":
                    in_block_comment = True
                elif not char.isspace():
                    self._emit(cursor, cursor + 1)
                start = cursor + 1

        if not in_line_comment and not in_block_comment:
            self._emit(start, len(text))
        return self.tokens

    @staticmethod
    def is_word_char(char: str) -> bool:
        """Whether the character can be part of a multi-character token."""
        return char.isalnum() or char == "_" or char == "@"

    def _peek(self, index: int) -> str | None:
        """Return the character at ``index`` or None past the end of the text.

        A comment opener that is the last character of the text
        has no following character, so it's treated as a plain token.
        """
        if index < len(self.text):
            return self.text[index]
        return None

    def _emit(self, start: int, end: int) -> None:
        if end > start:
            self.tokens.append(Token(start, end, self.text[start:end]))


def tokenize(text: str) -> list[Token]:
    """Shortcut for ``Tokenizer(text).tokenize()``."""
    return Tokenizer(text).tokenize()


def lowercase(text: str) -> str:
    """Lowercase a text one character at a time, preserving its length.

    Matching happens on the lowercased text but offsets are used to
    slice the original one, so characters whose lowercase form is
    longer than one character (like ``"İ"``) are left untouched.
    Each character is lowered on its own, without context sensitive
    rules like the Greek final sigma, so a word lowers the same way
    wherever it appears.

    >>> lowercase("SELECT Name")
    'select name'
    """
    return "".join(c.lower() if len(c.lower()) == 1 else c for c in text)
