"""Participant Document Columns — shared shape of project and chatroom documents.

Invariants:
    - id is an opaque 32-char hex string generated at insert, never reassigned
    - owner and user1 are non-nullable; user2 null means single-party
    - user1_email / user2_email are unique per table when set (NULLs never collide)
    - messages is an ordered JSON array of {"content", "owner"} records
    - created_at set on insert; updated_at refreshed on every UPDATE

Design Decisions:
    - JSON column for messages: embedded records stored as-is, no join table
    - Principal ids stored as plain strings: the auth collaborator owns their format
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, DateTime, JSON
from sqlalchemy.orm import Mapped, mapped_column


def _new_document_id() -> str:
    return uuid.uuid4().hex


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ParticipantDocumentMixin:
    """Columns shared by every two-participant document collection."""

    id: Mapped[str] = mapped_column(
        String(32), primary_key=True, default=_new_document_id,
    )
    title: Mapped[str | None] = mapped_column(String(500), nullable=True)
    owner: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    user1: Mapped[str] = mapped_column(String(64), nullable=False)
    user2: Mapped[str | None] = mapped_column(String(64), nullable=True)
    user1_email: Mapped[str | None] = mapped_column(
        String(320), nullable=True, unique=True,
    )
    user2_email: Mapped[str | None] = mapped_column(
        String(320), nullable=True, unique=True,
    )
    messages: Mapped[list] = mapped_column(
        JSON, nullable=False, default=list,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False,
        default=_utcnow, onupdate=_utcnow,
    )
