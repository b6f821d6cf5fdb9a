"""Single-statement writes with database errors mapped to StorageError kinds."""
import logging
from typing import TypeVar

from sqlalchemy.exc import DataError, IntegrityError
from sqlalchemy.orm import Session

from golfcartly.core.errors import ErrorKind, StorageError

logger = logging.getLogger(__name__)

T = TypeVar("T")

UNIQUE_VIOLATION = "23505"


def is_unique_violation(error: IntegrityError) -> bool:
    if getattr(error.orig, "pgcode", None) == UNIQUE_VIOLATION:
        return True
    # SQLite reports constraint failures by message only
    return "UNIQUE constraint failed" in str(error.orig)


def commit(db: Session) -> None:
    """Commit, rolling back and raising StorageError on constraint or data errors."""
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        if is_unique_violation(e):
            raise StorageError(ErrorKind.CONFLICT, "A record with the same unique key already exists") from e
        raise StorageError(ErrorKind.VALIDATION, f"Constraint violated: {e.orig}") from e
    except DataError as e:
        db.rollback()
        raise StorageError(ErrorKind.VALIDATION, f"Invalid value: {e.orig}") from e


def save(db: Session, instance: T) -> T:
    """Insert or update ``instance`` and return it as stored."""
    db.add(instance)
    commit(db)
    db.refresh(instance)
    return instance
