"""Helpers for interpreting database driver errors."""

from sqlalchemy.exc import IntegrityError


def is_unique_violation(exc: IntegrityError) -> bool:
    """Tell unique-constraint violations apart from NOT NULL, FK, etc.

    PostgreSQL reports "duplicate key value violates unique constraint",
    SQLite reports "UNIQUE constraint failed".
    """
    orig = str(exc.orig).lower() if exc.orig else ""
    return "unique" in orig or "duplicate" in orig
