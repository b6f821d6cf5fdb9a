"""Predicates shared by the list queries."""
from sqlalchemy import func, select
from sqlalchemy.orm import Session


def array_contains(db: Session, column, value: str):
    """``value = ANY(column)`` for a text-array column.

    On SQLite the column is stored as JSON, so membership is tested with
    ``json_each`` instead.
    """
    if db.get_bind().dialect.name == "postgresql":
        return column.any(value)
    elements = func.json_each(column).table_valued("value")
    return select(elements.c.value).where(elements.c.value == value).exists()


def substring(column, term: str):
    """LIKE match of ``term`` anywhere in ``column``, with wildcards escaped."""
    return column.contains(term, autoescape=True)
