"""ORM Models — SQLAlchemy declarative models for the two document collections.

Invariants:
    - All models inherit from Base (db/base.py)
    - Project and Chatroom share their columns through ParticipantDocumentMixin

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before create_all
      or alembic autogenerate runs
"""

from pairwork.models.project import Project  # noqa: F401
from pairwork.models.chatroom import Chatroom  # noqa: F401
