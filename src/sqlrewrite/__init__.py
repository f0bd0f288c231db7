"""SQLRewrite

Rewrite SQL text through ordered search and replace rules.

SQLRewrite is not a SQL parser, it has no grammar and no notion of
statements or clauses. It splits the SQL text into tokens and looks
for sequences of tokens matching a *pattern*, which can contain variables
that capture arbitrary portions of the query. Occurrences of the pattern
are then replaced by a *replacement template* where the variables are
substituted with the text they captured.

This is typically used to translate queries from one SQL dialect to another::

    rules = [
        ("ISNULL(@a,@b)", "COALESCE(@a,@b)"),
        ("GETDATE()", "CURRENT_TIMESTAMP"),
    ]
    translate("SELECT ISNULL(name, '-'), GETDATE() FROM users", rules)

would produce::

    SELECT COALESCE(name, '-'), CURRENT_TIMESTAMP FROM users

The engine is constituted by the following components,
each one building on top of the previous one:

1. Tokenizer
2. Pattern compiler
3. Matcher
4. Rewriter
5. Translator

The :class:`sqlrewrite.tokenize.Tokenizer` splits the text into
words (runs of alphanumeric characters, ``_`` and ``@``) and
single special characters, discarding whitespace and comments.

:func:`sqlrewrite.pattern.compile_pattern` tokenizes a search pattern
and marks the ``@name`` tokens as variables, producing a
:class:`sqlrewrite.pattern.CompiledPattern` that can be reused on any text.

:func:`sqlrewrite.matcher.find` is the core of the engine, it locates the
leftmost occurrence of a pattern, capturing the variables while keeping
track of quotes and parentheses, so that a variable doesn't stop capturing
at a token that is part of a string literal or of a nested expression.

:func:`sqlrewrite.rewriter.rewrite` replaces occurrences of a pattern
until no occurrence is left.

:func:`sqlrewrite.translate.translate` and :class:`sqlrewrite.translate.Translator`
apply a whole set of rules, in order, each one until it no longer matches.

Rule sets can be loaded from CSV files through :func:`sqlrewrite.rules.load_rules`.
"""

from .matcher import find
from .pattern import InvalidPatternError, compile_pattern
from .rewriter import RewriteLimitError, rewrite
from .rules import RuleSetError, load_rules
from .tokenize import tokenize
from .translate import Translator, translate

__all__ = (
    "tokenize",
    "compile_pattern",
    "find",
    "rewrite",
    "translate",
    "Translator",
    "load_rules",
    "InvalidPatternError",
    "RewriteLimitError",
    "RuleSetError",
)
