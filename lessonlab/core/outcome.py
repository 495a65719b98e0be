"""
Outcome interpreter for verification query results.

A verification query passes when its first row projects a boolean
``outcome`` column that is true. Any other shape is a fail.

Dependencies: None (pure domain layer)
System role: Pass/fail decision for code challenges
"""

from collections.abc import Mapping, Sequence
from typing import Any

OUTCOME_COLUMN = "outcome"

Row = Mapping[str, Any]
ResultSet = Sequence[Row]


def optional_bool_column(row: Row, name: str) -> bool | None:
    """
    Look up a boolean column by name.

    Args:
        row: One result row (column name -> value)
        name: Column name

    Returns:
        bool | None: None when the column is absent, otherwise True only
        for a genuine boolean True. Non-boolean values read as False.
    """
    if name not in row:
        return None

    value = row[name]
    return value if isinstance(value, bool) else False


def interpret(result_set: ResultSet) -> bool:
    """
    Decide whether a verification result set is a pass.

    Args:
        result_set: Rows returned by the verification query

    Returns:
        bool: True if the first row has ``outcome`` set to boolean True
    """
    if not result_set:
        return False

    outcome = optional_bool_column(result_set[0], OUTCOME_COLUMN)
    return bool(outcome)
