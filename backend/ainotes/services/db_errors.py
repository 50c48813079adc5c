"""
Translation of SQLAlchemy failures into application exceptions.

Infrastructure problems must not look like a missing row: they become
DatabaseError (500), or ConflictError (409) when the store rejected a write
on an integrity constraint.
"""

import logging
from typing import Any

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from ainotes.exceptions import ConflictError, DatabaseError, NotesAppError

logger = logging.getLogger(__name__)


def translate_db_error(
    error: SQLAlchemyError,
    action: str,
    **context: Any,
) -> NotesAppError:
    """Log `error` with its traceback and return the exception to raise."""
    logger.error("Database error while %s: %s", action, str(error), exc_info=True)
    context["error_type"] = type(error).__name__
    if isinstance(error, IntegrityError):
        return ConflictError(context=context)
    return DatabaseError(
        message=f"A database error occurred while {action}. Please try again.",
        context=context,
    )
