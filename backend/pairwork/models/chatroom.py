"""Chatroom ORM — persists chatroom documents.

Invariants:
    - Table name matches the public collection name ("chatrooms")
"""

from pairwork.db.base import Base
from pairwork.models.participant_document import ParticipantDocumentMixin


class Chatroom(ParticipantDocumentMixin, Base):
    """Chatroom document — same shape as Project, separate collection."""
    __tablename__ = "chatrooms"

    def __repr__(self) -> str:
        return f"<Chatroom id={self.id} owner={self.owner}>"
