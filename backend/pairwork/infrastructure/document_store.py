"""Document Store — SQLAlchemy implementation of the DocumentRepository protocol.

Invariants:
    - One repository instance per request, bound to that request's AsyncSession
    - Every write commits before returning; the returned document is refreshed
    - update_by_id applies only the keys it is given ($set semantics)
    - Unique violations become DuplicateValueError (409); other integrity
      failures ConstraintViolationError (400); any other driver error DatabaseError

Design Decisions:
    - Errors mapped here rather than in get_db: the route's exception must be the
      one the global handler sees, not one raised while unwinding the dependency
    - find_all has no ORDER BY: storage order is the only guarantee offered
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from pairwork.core.domain_types import DocumentId, ResourceKind
from pairwork.core.errors import (
    ConstraintViolationError, DatabaseError, DuplicateValueError,
)
from pairwork.models.participant_document import ParticipantDocumentMixin

logger = logging.getLogger(__name__)

_UNIQUE_VIOLATION_SQLSTATE = "23505"


def _is_unique_violation(error: IntegrityError) -> bool:
    """True for duplicate-key failures; NOT NULL and CHECK failures are not."""
    orig = error.orig
    sqlstate = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    if sqlstate:
        return sqlstate == _UNIQUE_VIOLATION_SQLSTATE
    # sqlite reports no sqlstate: "UNIQUE constraint failed: projects.user1_email"
    return "unique" in str(orig).lower()


class SqlDocumentRepository:
    """Document CRUD over one ORM model."""

    def __init__(
        self,
        db: AsyncSession,
        model: type[ParticipantDocumentMixin],
        kind: ResourceKind,
    ):
        self._db = db
        self._model = model
        self._kind = kind

    @asynccontextmanager
    async def _writing(
        self, operation: str, document_id: str | None = None,
    ) -> AsyncGenerator[None, None]:
        try:
            yield
            await self._db.commit()
        except IntegrityError as e:
            await self._db.rollback()
            if _is_unique_violation(e):
                logger.warning(
                    f"Unique constraint violated on {operation}: {e.orig}",
                    extra={"resource": self._kind.value, "resource_id": document_id},
                )
                raise DuplicateValueError(self._kind.singular)
            logger.warning(
                f"Constraint violated on {operation}: {e.orig}",
                extra={"resource": self._kind.value, "resource_id": document_id},
            )
            raise ConstraintViolationError(self._kind.singular, document_id)
        except SQLAlchemyError as e:
            await self._db.rollback()
            logger.error(
                f"DB error on {operation}: {e}",
                extra={"resource": self._kind.value},
            )
            raise DatabaseError("Database operation failed", operation)

    async def create(self, fields: dict) -> ParticipantDocumentMixin:
        document = self._model(**fields)
        async with self._writing("insert"):
            self._db.add(document)
        await self._db.refresh(document)
        return document

    async def find_all(self) -> list[ParticipantDocumentMixin]:
        try:
            result = await self._db.execute(select(self._model))
        except SQLAlchemyError as e:
            logger.error(f"DB error on select: {e}")
            raise DatabaseError("Database operation failed", "select")
        return list(result.scalars().all())

    async def find_by_id(
        self, document_id: DocumentId,
    ) -> ParticipantDocumentMixin | None:
        try:
            return await self._db.get(self._model, document_id)
        except SQLAlchemyError as e:
            logger.error(f"DB error on get: {e}")
            raise DatabaseError("Database operation failed", "select")

    async def update_by_id(
        self, document_id: DocumentId, changes: dict,
    ) -> ParticipantDocumentMixin | None:
        document = await self.find_by_id(document_id)
        if document is None:
            return None
        async with self._writing("update", document_id):
            for key, value in changes.items():
                setattr(document, key, value)
        await self._db.refresh(document)
        return document

    async def delete_by_id(self, document_id: DocumentId) -> bool:
        document = await self.find_by_id(document_id)
        if document is None:
            return False
        async with self._writing("delete", document_id):
            await self._db.delete(document)
        return True
