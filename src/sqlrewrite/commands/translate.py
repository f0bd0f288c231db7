"""Command line interface for translating SQL queries with rewrite rules.

This module provides a command line interface to apply the rules
loaded by :func:`sqlrewrite.rules.load_rules` to a query
through a :class:`sqlrewrite.translate.Translator`.

The translated query is printed to the console.
"""

import argparse
import logging
import sys

from sqlrewrite.pattern import InvalidPatternError
from sqlrewrite.rewriter import RewriteLimitError
from sqlrewrite.rules import RuleSetError, load_rules
from sqlrewrite.tokenize import tokenize
from sqlrewrite.translate import Rule, Translator
from sqlrewrite.utils import tabulate


def main(argv: list[str] | None = None) -> int:
    """Parse the command line arguments and translate the SQL query."""
    parser = argparse.ArgumentParser(
        description="Rewrite a SQL query applying search and replace rules."
    )
    parser.add_argument(
        "-r",
        "--rules",
        action="append",
        default=[],
        help="CSV file with pattern,replacement columns. Can be provided multiple times.",
    )
    parser.add_argument(
        "-p",
        "--pattern",
        action="append",
        nargs=2,
        default=[],
        metavar=("PATTERN", "REPLACEMENT"),
        help="Inline rule, applied after the rules files. Can be provided multiple times.",
    )
    parser.add_argument(
        "--max-iterations",
        type=int,
        default=None,
        help="Maximum number of replacements for each rule.",
    )
    parser.add_argument(
        "--tokens",
        action="store_true",
        help="Print the tokens of the query instead of translating it.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log each applied replacement."
    )
    parser.add_argument("sql", type=str, help="The SQL query, - to read from stdin.")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    sql = sys.stdin.read() if args.sql == "-" else args.sql
    if args.tokens:
        print(tabulate.tabulate(tabulate.tokens_to_recordbatch(tokenize(sql))))
        return 0

    try:
        rules: list[Rule] = []
        for filename in args.rules:
            rules.extend(load_rules(filename))
        rules.extend(Rule(pattern, replacement) for pattern, replacement in args.pattern)
        translator = Translator(rules, max_iterations=args.max_iterations)
    except (OSError, RuleSetError, InvalidPatternError) as e:
        print(f"Invalid rules, {e}")
        return 1

    try:
        print(translator.translate(sql))
    except RewriteLimitError as e:
        print(f"Translation aborted, {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
