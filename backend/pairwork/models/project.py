"""Project ORM — persists project documents.

Invariants:
    - Table name matches the public collection name ("projects")
"""

from pairwork.db.base import Base
from pairwork.models.participant_document import ParticipantDocumentMixin


class Project(ParticipantDocumentMixin, Base):
    """Project document — owner plus up to two participants and their messages."""
    __tablename__ = "projects"

    def __repr__(self) -> str:
        return f"<Project id={self.id} owner={self.owner}>"
