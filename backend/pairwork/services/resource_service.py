"""Resource Service — INDEX / SHOW / CREATE / UPDATE / DESTROY for one document kind.

Invariants:
    - CREATE always stores owner = requesting principal, whatever the payload says
    - UPDATE never passes "owner" to storage
    - UPDATE on a single-party document (user2 unset) is never gated
    - SHOW / UPDATE / DESTROY on an unknown id raise ResourceNotFoundError, nothing else
    - DESTROY checks ownership before deleting; a refused delete leaves the document intact

Design Decisions:
    - Impureim sandwich: fetch (IO) -> core/ownership.py checks (pure) -> write (IO)
    - "Not involved" on a two-party update is logged and the update still applies,
      matching the observed API; enforce_participants=True turns it into a 403
"""

import logging

from pairwork.core.domain_types import DocumentId, Principal, ResourceKind
from pairwork.core.errors import NotParticipantError
from pairwork.core.ownership import (
    handle_404, is_involved, is_single_party, require_ownership,
)
from pairwork.core.repository_protocols import DocumentLike, DocumentRepository

logger = logging.getLogger(__name__)


class ResourceService:
    """CRUD orchestration for one collection."""

    def __init__(
        self,
        repository: DocumentRepository,
        kind: ResourceKind,
        enforce_participants: bool = False,
    ):
        self.repository = repository
        self.kind = kind
        self.enforce_participants = enforce_participants

    async def index(self) -> list[DocumentLike]:
        return await self.repository.find_all()

    async def show(self, document_id: DocumentId) -> DocumentLike:
        document = await self.repository.find_by_id(document_id)
        return handle_404(document, self.kind, document_id)

    async def create(self, fields: dict, principal: Principal) -> DocumentLike:
        """Store a new document owned by principal."""
        fields = {**fields, "owner": principal.id}
        document = await self.repository.create(fields)
        logger.info(
            f"Created {self.kind.value} {document.id}",
            extra={
                "resource": self.kind.value,
                "resource_id": document.id,
                "principal_id": principal.id,
            },
        )
        return document

    async def update(
        self,
        document_id: DocumentId,
        changes: dict,
        principal: Principal | None = None,
    ) -> DocumentLike:
        """Apply the given fields to an existing document.

        changes is expected to be blank-stripped already (the update
        envelopes do it); owner is dropped here regardless of the caller.
        """
        changes = {k: v for k, v in changes.items() if k != "owner"}
        document = handle_404(
            await self.repository.find_by_id(document_id),
            self.kind, document_id,
        )

        if not is_single_party(document) and not is_involved(changes, document):
            if self.enforce_participants:
                raise NotParticipantError(self.kind.singular, document_id)
            logger.warning(
                f"You are not involved in this {self.kind.value}",
                extra={
                    "resource": self.kind.value,
                    "resource_id": document_id,
                    "principal_id": principal.id if principal else None,
                },
            )

        updated = await self.repository.update_by_id(document_id, changes)
        # Deleted between the read and the write
        updated = handle_404(updated, self.kind, document_id)
        logger.info(
            f"Updated {self.kind.value} {document_id}: {sorted(changes)}",
            extra={"resource": self.kind.value, "resource_id": document_id},
        )
        return updated

    async def destroy(self, document_id: DocumentId, principal: Principal) -> None:
        """Delete a document owned by principal."""
        document = handle_404(
            await self.repository.find_by_id(document_id),
            self.kind, document_id,
        )
        require_ownership(principal, document, self.kind)
        await self.repository.delete_by_id(document_id)
        logger.info(
            f"Deleted {self.kind.value} {document_id}",
            extra={
                "resource": self.kind.value,
                "resource_id": document_id,
                "principal_id": principal.id,
            },
        )
