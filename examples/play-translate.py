"""Translate a few SQL Server queries to PostgreSQL.

Loads the rules from ``examples/data/sqlserver_to_postgres.csv``
and applies them to a set of queries, printing the original
and the translated query side by side.
"""

import os

from sqlrewrite import Translator, load_rules

RULES_FILE = os.path.join(os.path.dirname(__file__), "data", "sqlserver_to_postgres.csv")

QUERIES = [
    "IF OBJECT_ID('tempdb..#people', 'U') IS NOT NULL DROP TABLE #people;",
    "SELECT ISNULL(name, 'unknown') AS name, LEN(ISNULL(city, '')) FROM people",
    "SELECT DATEADD(dd, 30, GETDATE()) AS due_date",
    "SELECT CAST(notes AS VARCHAR(MAX)) FROM visits -- ISNULL(a, b) in comments is ignored",
]

translator = Translator(load_rules(RULES_FILE))
print(translator)
for query in QUERIES:
    print("")
    print("  ", query)
    print("=>", translator.translate(query))
