"""Route Dependencies — wires request-scoped storage into a ResourceService.

Invariants:
    - One repository and one service per request, sharing that request's session
    - enforce_participants read from settings at request time (overridable in tests)
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from pairwork.config import Settings, get_settings
from pairwork.core.domain_types import ResourceKind
from pairwork.infrastructure.database import get_db
from pairwork.infrastructure.document_store import SqlDocumentRepository
from pairwork.models.chatroom import Chatroom
from pairwork.models.project import Project
from pairwork.services.resource_service import ResourceService


def get_project_service(
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> ResourceService:
    return ResourceService(
        SqlDocumentRepository(db, Project, ResourceKind.PROJECT),
        ResourceKind.PROJECT,
        enforce_participants=settings.enforce_participants,
    )


def get_chatroom_service(
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> ResourceService:
    return ResourceService(
        SqlDocumentRepository(db, Chatroom, ResourceKind.CHATROOM),
        ResourceKind.CHATROOM,
        enforce_participants=settings.enforce_participants,
    )
