"""Format tabular data into a text table for print.

Used by the ``sqlrewrite-translate --tokens`` command to show how
a SQL text was tokenized, which is the first thing to check when a
pattern doesn't match where it's expected to:

    >>> from sqlrewrite.tokenize import tokenize
    >>> print(tabulate(tokens_to_recordbatch(tokenize("SELECT a>=1"))))
    start | end | text
    ----- | --- | ------
        0 |   6 | SELECT
        7 |   8 | a
        8 |   9 | >
        9 |  10 | =
       10 |  11 | 1
"""

from typing import Any, Sequence

import pyarrow as pa

from ..tokenize import Token


def tokens_to_recordbatch(tokens: Sequence[Token]) -> pa.RecordBatch:
    """Convert a sequence of tokens to a RecordBatch with a row per token."""
    return pa.RecordBatch.from_pydict(
        {
            "start": pa.array([t.start for t in tokens], type=pa.int64()),
            "end": pa.array([t.end for t in tokens], type=pa.int64()),
            "text": pa.array([t.text for t in tokens], type=pa.string()),
        }
    )


def tabulate(recordbatch: pa.RecordBatch, max_rows: int = 50) -> str:
    """Format a RecordBatch into a text table.

    Numeric columns are right aligned, all other columns are left aligned.
    Only the first ``max_rows`` rows are displayed.
    """
    cols = recordbatch.column_names
    numeric = [
        pa.types.is_integer(field.type) or pa.types.is_floating(field.type)
        for field in recordbatch.schema
    ]
    rows = [
        [format_value(row[c]) for c in cols]
        for row in recordbatch.slice(length=max_rows).to_pylist()
    ]

    colsizes = [
        max([len(cols[idx])] + [len(row[idx]) for row in rows])
        for idx in range(len(cols))
    ]
    lines = [
        maketablerow(cols, colsizes),
        maketablerow(["-" * size for size in colsizes], colsizes),
    ]
    lines.extend(maketablerow(row, colsizes, numeric) for row in rows)

    if recordbatch.num_rows > max_rows:
        lines.append(f"... and {recordbatch.num_rows - max_rows} more rows")
    return "\n".join(lines)


def maketablerow(
    values: list[str], colsizes: list[int], right_align: list[bool] | None = None
) -> str:
    """Make a table row padding each value to the size of its column."""
    right_align = right_align or [False] * len(values)
    cells = [
        value.rjust(size) if right else value.ljust(size)
        for value, size, right in zip(values, colsizes, right_align)
    ]
    return " | ".join(cells).rstrip()


def format_value(v: Any, max_width: int = 30) -> str:
    """Format a value to be printed in the table, truncating long strings."""
    v = "" if v is None else str(v)
    if len(v) > max_width:
        v = v[: max_width - 3] + "..."
    return v
