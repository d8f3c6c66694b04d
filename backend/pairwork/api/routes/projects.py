"""Project Routes — INDEX, SHOW, CREATE, UPDATE, DESTROY under /projects.

Invariants:
    - Every route except PATCH requires a bearer token (require_token)
    - PATCH token requirement follows settings.update_requires_token
    - PATCH answers 201 with the updated document
    - Responses omit unset optional fields (response_model_exclude_none)
"""

import logging

from fastapi import APIRouter, Depends, status

from pairwork.api.dependencies import get_project_service
from pairwork.core.domain_types import DocumentId, Principal
from pairwork.infrastructure.token_auth import (
    require_token, resolve_update_principal,
)
from pairwork.schemas.resource import (
    DocumentOut, ProjectCreateRequest, ProjectEnvelope, ProjectList,
    ProjectUpdateRequest,
)
from pairwork.services.resource_service import ResourceService

logger = logging.getLogger(__name__)
router = APIRouter(tags=["projects"])


@router.get(
    "/projects", response_model=ProjectList,
    response_model_exclude_none=True,
)
async def index_projects(
    principal: Principal = Depends(require_token),
    service: ResourceService = Depends(get_project_service),
):
    """List every project."""
    documents = await service.index()
    return ProjectList(
        projects=[DocumentOut.model_validate(d) for d in documents],
    )


@router.get(
    "/projects/{project_id}", response_model=ProjectEnvelope,
    response_model_exclude_none=True,
)
async def show_project(
    project_id: str,
    principal: Principal = Depends(require_token),
    service: ResourceService = Depends(get_project_service),
):
    document = await service.show(DocumentId(project_id))
    return ProjectEnvelope(project=DocumentOut.model_validate(document))


@router.post(
    "/projects", response_model=ProjectEnvelope,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
async def create_project(
    body: ProjectCreateRequest,
    principal: Principal = Depends(require_token),
    service: ResourceService = Depends(get_project_service),
):
    """Create a project owned by the requester."""
    document = await service.create(body.project.model_dump(), principal)
    return ProjectEnvelope(project=DocumentOut.model_validate(document))


@router.patch(
    "/projects/{project_id}", response_model=ProjectEnvelope,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
async def update_project(
    project_id: str,
    body: ProjectUpdateRequest,
    principal: Principal | None = Depends(resolve_update_principal),
    service: ResourceService = Depends(get_project_service),
):
    """Apply the sent (non-blank) fields to a project."""
    document = await service.update(
        DocumentId(project_id),
        body.project.model_dump(exclude_unset=True),
        principal,
    )
    return ProjectEnvelope(project=DocumentOut.model_validate(document))


@router.delete(
    "/projects/{project_id}", status_code=status.HTTP_204_NO_CONTENT,
)
async def destroy_project(
    project_id: str,
    principal: Principal = Depends(require_token),
    service: ResourceService = Depends(get_project_service),
):
    """Delete a project; only its owner may."""
    await service.destroy(DocumentId(project_id), principal)
