"""Chatroom Routes — INDEX, SHOW, CREATE, UPDATE, DESTROY under /chatrooms.

Invariants:
    - Same auth and status rules as the project routes
    - DELETE /games/{id} is a deprecated alias of DELETE /chatrooms/{id}

Design Decisions:
    - /games/{id} kept because deployed clients delete chatrooms through it;
      new clients should use /chatrooms/{id}
"""

import logging

from fastapi import APIRouter, Depends, status

from pairwork.api.dependencies import get_chatroom_service
from pairwork.core.domain_types import DocumentId, Principal
from pairwork.infrastructure.token_auth import (
    require_token, resolve_update_principal,
)
from pairwork.schemas.resource import (
    ChatroomCreateRequest, ChatroomEnvelope, ChatroomList,
    ChatroomUpdateRequest, DocumentOut,
)
from pairwork.services.resource_service import ResourceService

logger = logging.getLogger(__name__)
router = APIRouter(tags=["chatrooms"])


@router.get(
    "/chatrooms", response_model=ChatroomList,
    response_model_exclude_none=True,
)
async def index_chatrooms(
    principal: Principal = Depends(require_token),
    service: ResourceService = Depends(get_chatroom_service),
):
    documents = await service.index()
    return ChatroomList(
        chatrooms=[DocumentOut.model_validate(d) for d in documents],
    )


@router.get(
    "/chatrooms/{chatroom_id}", response_model=ChatroomEnvelope,
    response_model_exclude_none=True,
)
async def show_chatroom(
    chatroom_id: str,
    principal: Principal = Depends(require_token),
    service: ResourceService = Depends(get_chatroom_service),
):
    document = await service.show(DocumentId(chatroom_id))
    return ChatroomEnvelope(chatroom=DocumentOut.model_validate(document))


@router.post(
    "/chatrooms", response_model=ChatroomEnvelope,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
async def create_chatroom(
    body: ChatroomCreateRequest,
    principal: Principal = Depends(require_token),
    service: ResourceService = Depends(get_chatroom_service),
):
    document = await service.create(body.chatroom.model_dump(), principal)
    return ChatroomEnvelope(chatroom=DocumentOut.model_validate(document))


@router.patch(
    "/chatrooms/{chatroom_id}", response_model=ChatroomEnvelope,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
async def update_chatroom(
    chatroom_id: str,
    body: ChatroomUpdateRequest,
    principal: Principal | None = Depends(resolve_update_principal),
    service: ResourceService = Depends(get_chatroom_service),
):
    document = await service.update(
        DocumentId(chatroom_id),
        body.chatroom.model_dump(exclude_unset=True),
        principal,
    )
    return ChatroomEnvelope(chatroom=DocumentOut.model_validate(document))


@router.delete(
    "/chatrooms/{chatroom_id}", status_code=status.HTTP_204_NO_CONTENT,
)
async def destroy_chatroom(
    chatroom_id: str,
    principal: Principal = Depends(require_token),
    service: ResourceService = Depends(get_chatroom_service),
):
    """Delete a chatroom; only its owner may."""
    await service.destroy(DocumentId(chatroom_id), principal)


@router.delete(
    "/games/{chatroom_id}", status_code=status.HTTP_204_NO_CONTENT,
    deprecated=True,
)
async def destroy_chatroom_legacy_path(
    chatroom_id: str,
    principal: Principal = Depends(require_token),
    service: ResourceService = Depends(get_chatroom_service),
):
    """Legacy path for DELETE /chatrooms/{id}."""
    logger.warning(
        "DELETE /games/{id} is deprecated, use /chatrooms/{id}",
        extra={"resource": "chatroom", "resource_id": chatroom_id},
    )
    await service.destroy(DocumentId(chatroom_id), principal)
