"""Ownership Checks — pure classifiers turning lookup results into domain errors.

Invariants:
    - handle_404 returns the document unchanged when present, raises otherwise
    - require_ownership compares principal id to document.owner, nothing else
    - is_involved only reads the payload and the stored document (no IO)

Design Decisions:
    - Classifiers raise instead of returning error values: route handlers stay a
      straight line and the global handler maps the exception to a status
    - is_involved compares the payload's asserted participants, not the requester:
      PATCH may run without a token, so there is no principal to compare against
"""

from typing import Protocol, TypeVar

from pairwork.core.domain_types import Principal, ResourceKind
from pairwork.core.errors import NotOwnerError, ResourceNotFoundError


class OwnedDocument(Protocol):
    """Structural contract for documents carrying ownership fields."""
    id: str
    owner: str
    user1: str
    user2: str | None


D = TypeVar("D")


def handle_404(document: D | None, kind: ResourceKind, document_id: str) -> D:
    """Return document, or raise ResourceNotFoundError if storage found nothing."""
    if document is None:
        raise ResourceNotFoundError(kind.singular, document_id)
    return document


def require_ownership(
    principal: Principal, document: OwnedDocument, kind: ResourceKind,
) -> None:
    """Raise NotOwnerError unless principal owns the document."""
    if document.owner != principal.id:
        raise NotOwnerError(kind.singular, document.id, principal.id)


def is_single_party(document: OwnedDocument) -> bool:
    """True when the document has no second participant."""
    return document.user2 is None


def is_involved(changes: dict, document: OwnedDocument) -> bool:
    """False when the payload's user1 and user2 both differ from the stored pair."""
    return not (
        changes.get("user1") != document.user1
        and changes.get("user2") != document.user2
    )
