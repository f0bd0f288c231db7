"""Apply an ordered set of rewrite rules to SQL text.

A rule is a ``(pattern, replacement)`` pair, see :mod:`sqlrewrite.pattern`
for the pattern syntax and :mod:`sqlrewrite.rewriter` for how replacements
are applied. Rules are applied strictly in the order they are provided,
each one until its pattern can't be found anymore, before moving to the
next one. So each rule works on the output of the rules that precede it::

    >>> translate("SELECT ISNULL(a, 0) FROM t", [
    ...     ("ISNULL(@a,@b)", "COALESCE(@a,@b)"),
    ...     ("COALESCE(", "NVL("),
    ... ])
    'SELECT NVL(a, 0) FROM t'

Variables capture the whitespace surrounding the captured text,
which is why the template above doesn't add a space after the comma.

:func:`translate` compiles each pattern right before applying it,
while :class:`Translator` compiles all rules upfront and can then
be reused to translate any number of texts.
"""

import logging
from typing import Iterable, NamedTuple

from .pattern import CompiledPattern, compile_pattern
from .rewriter import rewrite

logger = logging.getLogger(__name__)


class Rule(NamedTuple):
    """A search pattern and the template its occurrences are replaced with."""

    pattern: str
    replacement: str


def translate(
    text: str,
    rules: Iterable[tuple[str, str]],
    max_iterations: int | None = None,
) -> str:
    """Apply the rules, in order, to the text.

    If a pattern is invalid the translation is aborted,
    rules following the invalid one are not compiled.

    :param text: The SQL text to translate.
    :param rules: The ordered ``(pattern, replacement)`` pairs.
    :param max_iterations: Maximum number of replacements for each rule,
                           see :func:`sqlrewrite.rewriter.rewrite`.
    :raises InvalidPatternError: for the first invalid pattern.
    """
    for pattern, replacement in rules:
        text = rewrite(text, compile_pattern(pattern), replacement, max_iterations)
    return text


class Translator:
    """Translate texts using a set of precompiled rules.

    All the patterns are compiled when the translator is created,
    so an invalid pattern is reported before any text is processed.
    Rules sharing the same pattern text share the compiled pattern.

    >>> translator = Translator([("ISNULL(", "COALESCE(")])
    >>> translator.translate("SELECT isnull(a, 0) FROM t")
    'SELECT COALESCE(a, 0) FROM t'
    """

    def __init__(
        self, rules: Iterable[tuple[str, str]], max_iterations: int | None = None
    ) -> None:
        """
        :param rules: The ordered ``(pattern, replacement)`` pairs.
        :param max_iterations: Maximum number of replacements for each rule.
        :raises InvalidPatternError: for the first invalid pattern.
        """
        self.max_iterations = max_iterations
        self.rules = [Rule(pattern, replacement) for pattern, replacement in rules]
        compiled: dict[str, CompiledPattern] = {}
        for rule in self.rules:
            if rule.pattern not in compiled:
                compiled[rule.pattern] = compile_pattern(rule.pattern)
        self._compiled = compiled
        logger.debug(
            "Translator ready with %d rules, %d distinct patterns",
            len(self.rules),
            len(compiled),
        )

    def __len__(self) -> int:
        return len(self.rules)

    def __repr__(self) -> str:
        return (
            f"Translator(rules={len(self.rules)}, "
            f"max_iterations={self.max_iterations})"
        )

    def translate(self, text: str) -> str:
        """Apply all the rules, in order, to the text."""
        for rule in self.rules:
            pattern = self._compiled[rule.pattern]
            text = rewrite(text, pattern, rule.replacement, self.max_iterations)
        return text
