"""Replace occurrences of a pattern until none is left.

Once :func:`sqlrewrite.matcher.find` locates an occurrence of a pattern,
the matched span is replaced with the *replacement template* where every
variable name is substituted with the text the variable captured.
For example, with the pattern ``isnull(@a, @b)`` and the template
``coalesce(@a,@b)``, the text::

    SELECT ISNULL(name, 'unknown') FROM users

becomes::

    SELECT coalesce(name, 'unknown') FROM users

:func:`rewrite` repeats the search on the rewritten text until the pattern
can't be found anymore. It's up to the author of the rules to ensure that
a replacement can't produce a new occurrence of the pattern it replaced,
otherwise the rewrite never ends. To protect against misbehaving rules
a ``max_iterations`` limit can be provided, in which case
:class:`RewriteLimitError` is raised once it is exceeded.
"""

import logging

from .matcher import MatchResult, find
from .pattern import CompiledPattern

logger = logging.getLogger(__name__)


def substitute(template: str, bindings: dict[str, str]) -> str:
    """Replace each variable name in the template with its captured value.

    Variables are substituted in name order, every occurrence of the
    name is replaced, template variables that were not captured are
    left untouched.

    >>> substitute("coalesce(@a, @b)", {"@a": "x", "@b": "'-'"})
    "coalesce(x, '-')"
    """
    for name in sorted(bindings):
        template = template.replace(name, bindings[name])
    return template


def splice(text: str, match: MatchResult, replacement: str) -> str:
    """Replace the span of ``match`` in ``text`` with ``replacement``."""
    return text[: match.start] + replacement + text[match.end :]


def rewrite_once(text: str, pattern: CompiledPattern, replacement: str) -> str:
    """Replace the leftmost occurrence of pattern, if any.

    :param text: The SQL text to rewrite.
    :param pattern: The compiled search pattern.
    :param replacement: The replacement template.
    :returns: The rewritten text, or ``text`` itself when no match exists.
    """
    match = find(text, pattern)
    if match is None:
        return text
    return splice(text, match, substitute(replacement, match.bindings))


def rewrite(
    text: str,
    pattern: CompiledPattern,
    replacement: str,
    max_iterations: int | None = None,
) -> str:
    """Replace occurrences of pattern until the text contains none.

    After each replacement the whole text is searched again from the start,
    so occurrences produced by a replacement are replaced too.

    :param text: The SQL text to rewrite.
    :param pattern: The compiled search pattern.
    :param replacement: The replacement template.
    :param max_iterations: Maximum number of replacements, ``None``
                           means there is no limit.
    :raises RewriteLimitError: when more than ``max_iterations``
                               replacements would be needed.
    """
    iterations = 0
    match = find(text, pattern)
    while match is not None:
        if max_iterations is not None and iterations >= max_iterations:
            raise RewriteLimitError(pattern.source, max_iterations)
        logger.debug(
            "Replacing %r at [%d:%d] with %r",
            pattern.source,
            match.start,
            match.end,
            replacement,
        )
        text = splice(text, match, substitute(replacement, match.bindings))
        iterations += 1
        match = find(text, pattern)

    logger.debug("Pattern %r applied %d times", pattern.source, iterations)
    return text


class RewriteLimitError(RuntimeError):
    """A pattern kept matching after the maximum allowed replacements."""

    def __init__(self, pattern: str, max_iterations: int) -> None:
        super().__init__(
            f"Pattern still matching after {max_iterations} replacements: {pattern}"
        )
        self.pattern = pattern
        self.max_iterations = max_iterations
