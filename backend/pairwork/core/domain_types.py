"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - PrincipalId and DocumentId are opaque strings, never parsed or compared structurally
    - ResourceKind is the single place that knows collection names and JSON wrapper keys

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enum: serializes to JSON without custom encoders
"""

from dataclasses import dataclass
from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

PrincipalId = NewType("PrincipalId", str)
DocumentId = NewType("DocumentId", str)


@dataclass(frozen=True)
class Principal:
    """Authenticated requester resolved from a bearer credential."""
    id: PrincipalId


# ─── Enums ───────────────────────────────────────────────────────

class ResourceKind(str, Enum):
    """Resource families exposed by the API."""
    PROJECT = "project"
    CHATROOM = "chatroom"

    @property
    def singular(self) -> str:
        """JSON key wrapping a single document."""
        return self.value

    @property
    def plural(self) -> str:
        """JSON key wrapping a list of documents; also the collection name."""
        return f"{self.value}s"
