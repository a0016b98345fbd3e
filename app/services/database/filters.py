# app/services/database/filters.py
from functools import reduce
from typing import Iterable, Optional

from sqlalchemy import and_
from sqlalchemy.sql.elements import ColumnElement


def combine_conditions(conditions: Iterable[Optional[ColumnElement]]) -> Optional[ColumnElement]:
    """
    AND together every condition that is present.

    None entries are skipped. Returns None when nothing is left, meaning
    "no filter" rather than an always-true or always-false clause.
    """
    present = [condition for condition in conditions if condition is not None]
    if not present:
        return None
    return reduce(lambda acc, condition: and_(acc, condition), present)
