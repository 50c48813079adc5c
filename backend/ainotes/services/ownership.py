"""
AI Notes Backend — Ownership Scoping Helpers
============================================

What:  The one place where "only the caller's rows" is expressed.
Why:   Every read, update and delete in the services goes through these
       helpers, so an unscoped query has to be written on purpose.

    owned_by(Model, caller_id)            → WHERE model.owner_id = :caller
    get_owned_or_404(db, Model, id, ...)  → scoped single-row lookup
    owned_document_ids(db, caller_id)     → ids of the caller's documents

Not-found semantics:
    A row that exists but belongs to someone else is filtered out by the
    predicate, so it is reported exactly like a missing id.
"""

import logging
from typing import List, Optional, Type, TypeVar

from sqlalchemy import ColumnElement, select
from sqlalchemy.ext.asyncio import AsyncSession

from ainotes.exceptions import NotFoundError
from ainotes.models.document import Document

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT")


def owned_by(model: Type[ModelT], caller_id: str) -> ColumnElement[bool]:
    """Predicate restricting `model` to rows owned by `caller_id`."""
    return model.owner_id == caller_id


async def get_owned_or_404(
    db: AsyncSession,
    model: Type[ModelT],
    row_id: int,
    caller_id: str,
    resource: str,
) -> ModelT:
    """
    Load one row by primary key, scoped to the caller.

    Raises:
        NotFoundError: no row with that id is owned by the caller.
    """
    result = await db.execute(
        select(model).where(model.id == row_id, owned_by(model, caller_id)).limit(1)
    )
    row = result.scalar_one_or_none()
    if row is None:
        logger.debug("%s %s not found for caller %s", resource, row_id, caller_id)
        raise NotFoundError(resource=resource, resource_id=row_id)
    return row


async def owned_document_ids(
    db: AsyncSession,
    caller_id: str,
    document_id: Optional[int] = None,
) -> List[int]:
    """
    The caller's accessible document ids, optionally narrowed to one.

    Raises:
        NotFoundError: `document_id` was given but is not one of the
            caller's documents.
    """
    query = select(Document.id).where(owned_by(Document, caller_id))
    if document_id is not None:
        query = query.where(Document.id == document_id)
    result = await db.execute(query)
    ids = list(result.scalars().all())
    if document_id is not None and not ids:
        raise NotFoundError(resource="document", resource_id=document_id)
    return ids
