"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - All storage IO accessed through DocumentRepository
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: implementations do IO; the pure classifiers in
      core/ownership.py never await anything
"""

from datetime import datetime
from typing import Protocol

from pairwork.core.domain_types import DocumentId


class DocumentLike(Protocol):
    """Structural contract for stored project/chatroom documents."""
    id: str
    title: str | None
    owner: str
    user1: str
    user2: str | None
    user1_email: str | None
    user2_email: str | None
    messages: list
    created_at: datetime
    updated_at: datetime


class DocumentRepository(Protocol):
    """Contract for one document collection — implemented by shell."""
    async def create(self, fields: dict) -> DocumentLike: ...
    async def find_all(self) -> list[DocumentLike]: ...
    async def find_by_id(self, document_id: DocumentId) -> DocumentLike | None: ...
    async def update_by_id(
        self, document_id: DocumentId, changes: dict,
    ) -> DocumentLike | None: ...
    async def delete_by_id(self, document_id: DocumentId) -> bool: ...
