"""Health Probes — process liveness and document-store readiness.

Invariants:
    - GET /health/ answers 200 while the process runs and names the collections served
    - GET /health/ready answers 503 until the projects/chatrooms store accepts a query
    - Neither probe touches a document or requires a bearer token

Design Decisions:
    - Readiness goes through database.db_manager at call time, so a manager
      swapped by init_db/close_db (or a test) is always the one probed
"""

import logging
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from pairwork.core.domain_types import ResourceKind
from pairwork.infrastructure import database

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/health", tags=["health"])

SERVICE_NAME = "pairwork-api"
COLLECTIONS = [kind.plural for kind in ResourceKind]


@router.get("/", status_code=status.HTTP_200_OK)
async def liveness():
    """Liveness: the API process is up."""
    return {"status": "alive", "service": SERVICE_NAME, "collections": COLLECTIONS}


@router.get("/ready")
async def readiness():
    """Readiness: the document store behind projects and chatrooms answers."""
    manager = database.db_manager
    store_ok = await manager.health_check() if manager else False
    if not store_ok:
        logger.warning("Readiness failed: document store unreachable")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "not_ready", "reason": "document_store_unavailable"},
        )
    return {
        "status": "ready",
        "checks": {"document_store": "reachable"},
        "collections": COLLECTIONS,
    }
