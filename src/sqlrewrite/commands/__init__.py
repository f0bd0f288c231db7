"""Shell commands exposing SQLRewrite functionalities.

Translate
=========

``sqlrewrite-translate`` applies rewrite rules to a SQL query::

    sqlrewrite-translate -r examples/data/sqlserver_to_postgres.csv "SELECT TOP 10 name FROM users;"

Rules can also be provided inline, as many times as needed, and are applied
after the ones loaded from files::

    sqlrewrite-translate -p "ISNULL(" "COALESCE(" "SELECT ISNULL(a, 0) FROM t"

Passing ``-`` in place of the query reads it from the standard input.
To understand why a pattern doesn't match, ``--tokens`` prints how the
query is split into tokens instead of translating it.
"""
