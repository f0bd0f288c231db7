"""Compile search patterns into sequences of blocks.

A search pattern is written as plain SQL text where some tokens are
replaced by *variables*. A variable is any token that starts with ``@``
and is longer than the ``@`` itself, for example::

    CREATE TABLE @table (@definition);

compiles to the blocks::

    [create, table, @table*, (, @definition*, ), ;]

where ``*`` marks variable blocks. A bare ``@`` is a literal block.

Patterns are lowercased before being tokenized, matching is
case-insensitive, so all block texts are lowercase.

A variable captures everything up to the literal block that follows it,
for that reason a pattern can neither start nor end with a variable:
there would be nothing delimiting what the variable should capture.
Such patterns, and patterns that contain no token at all,
are rejected with :class:`InvalidPatternError`.
"""

import logging
from typing import Iterator, NamedTuple

from .tokenize import Token, lowercase, tokenize

logger = logging.getLogger(__name__)


class Block(NamedTuple):
    """A token of a compiled pattern, tagged as literal or variable."""

    start: int
    end: int
    text: str
    is_variable: bool

    @classmethod
    def from_token(cls, token: Token) -> "Block":
        """Wrap a token, marking it as variable when it's ``@name``."""
        is_variable = len(token.text) > 1 and token.text.startswith("@")
        return cls(token.start, token.end, token.text, is_variable)


class CompiledPattern:
    """A search pattern ready to be used by :func:`sqlrewrite.matcher.find`.

    Compiled patterns do not depend on any specific SQL text,
    so they can be reused to search any number of texts.
    """

    def __init__(self, source: str, blocks: tuple[Block, ...]) -> None:
        """
        :param source: The pattern text as it was provided by the user.
        :param blocks: The blocks the pattern was compiled to.
        """
        self.source = source
        self.blocks = blocks

    def __repr__(self) -> str:
        return f"CompiledPattern({self.source!r})"

    def __len__(self) -> int:
        return len(self.blocks)

    def __getitem__(self, index: int) -> Block:
        return self.blocks[index]

    def __iter__(self) -> Iterator[Block]:
        return iter(self.blocks)

    @property
    def variables(self) -> list[str]:
        """Names of the variables in the pattern, in order of appearance."""
        return [block.text for block in self.blocks if block.is_variable]


def compile_pattern(pattern: str) -> CompiledPattern:
    """Compile a search pattern into a :class:`CompiledPattern`.

    >>> compile_pattern("a = @x").variables
    ['@x']

    :param pattern: The text of the search pattern.
    :raises InvalidPatternError: when the pattern is empty or
                                 starts or ends with a variable.
    """
    tokens = tokenize(lowercase(pattern))
    blocks = tuple(Block.from_token(token) for token in tokens)
    if not blocks:
        raise InvalidPatternError(pattern, "pattern cannot be empty")
    if blocks[0].is_variable or blocks[-1].is_variable:
        raise InvalidPatternError(
            pattern, "pattern cannot start or end with a variable"
        )

    logger.debug("Compiled pattern %r into %d blocks", pattern, len(blocks))
    return CompiledPattern(pattern, blocks)


class InvalidPatternError(ValueError):
    """The search pattern can't be compiled."""

    def __init__(self, pattern: str, reason: str) -> None:
        super().__init__(f"Error in search pattern: {reason}: {pattern}")
        self.pattern = pattern
        self.reason = reason
