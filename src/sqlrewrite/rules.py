"""Load rule sets from tabular data.

Rules are usually maintained as CSV files with a column for the
search pattern and one for the replacement template, one rule per row::

    pattern,replacement
    "ISNULL(@a,@b)","COALESCE(@a,@b)"
    "GETDATE()","CURRENT_TIMESTAMP"

The rows order is preserved, as the order in which rules are applied
matters. Files are read through :mod:`pyarrow.csv`, so quoted values
can contain commas and newlines.

The loaded rules can be provided to :func:`sqlrewrite.translate.translate`
or to :class:`sqlrewrite.translate.Translator`::

    translator = Translator(load_rules("sqlserver_to_postgres.csv"))
    translator.translate(sql)

Rule tables that were already loaded in memory as a
:class:`pyarrow.Table` or :class:`pyarrow.RecordBatch` can be
converted with :func:`rules_from_table`.
"""

import logging

import pyarrow as pa
import pyarrow.csv

from .translate import Rule

logger = logging.getLogger(__name__)


def load_rules(
    filename: str,
    pattern_column: str = "pattern",
    replacement_column: str = "replacement",
) -> list[Rule]:
    """Load the rules from a CSV file.

    Pattern and replacement columns are always read as strings,
    and empty cells are loaded as empty strings.

    :param filename: The path of the local CSV file.
    :param pattern_column: Name of the column with the search patterns.
    :param replacement_column: Name of the column with the replacements.
    :raises RuleSetError: when the file is not a valid rules table.
    """
    convert_options = pa.csv.ConvertOptions(
        column_types={pattern_column: pa.string(), replacement_column: pa.string()},
        strings_can_be_null=False,
        quoted_strings_can_be_null=False,
    )
    parse_options = pa.csv.ParseOptions(newlines_in_values=True)
    try:
        table = pa.csv.read_csv(
            filename, parse_options=parse_options, convert_options=convert_options
        )
    except pa.ArrowInvalid as e:
        raise RuleSetError(f"Unable to read rules from {filename}: {e}") from e

    rules = rules_from_table(table, pattern_column, replacement_column)
    logger.debug("Loaded %d rules from %s", len(rules), filename)
    return rules


def rules_from_table(
    table: pa.Table | pa.RecordBatch,
    pattern_column: str = "pattern",
    replacement_column: str = "replacement",
) -> list[Rule]:
    """Convert the rows of a table to a list of :class:`sqlrewrite.translate.Rule`.

    Null replacements are treated as empty strings,
    so the rule removes the matched text.

    :param table: The table or recordbatch containing the rules.
    :param pattern_column: Name of the column with the search patterns.
    :param replacement_column: Name of the column with the replacements.
    :raises RuleSetError: when a column is missing or a pattern is null.
    """
    for column in (pattern_column, replacement_column):
        if column not in table.column_names:
            raise RuleSetError(f"Missing column in rules table: {column}")

    patterns = table.column(pattern_column).to_pylist()
    replacements = table.column(replacement_column).to_pylist()

    rules = []
    for rownum, (pattern, replacement) in enumerate(zip(patterns, replacements), 1):
        if pattern is None:
            raise RuleSetError(f"Missing pattern at row {rownum}")
        if replacement is None:
            replacement = ""
        rules.append(Rule(str(pattern), str(replacement)))
    return rules


class RuleSetError(ValueError):
    """The rules table is invalid."""
