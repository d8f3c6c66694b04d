"""Resource Schemas — request and response envelopes for projects and chatrooms.

Invariants:
    - Request bodies are wrapped: {"project": {...}} / {"chatroom": {...}}
    - DocumentCreate requires user1; a client-sent owner is accepted but ignored
    - DocumentUpdate has no owner field: extra keys are dropped on validation
    - DocumentUpdate rejects an explicit null for user1 and messages
    - Update envelopes strip blank-string fields BEFORE field validation runs
    - Wire names are camelCase (user1Email, createdAt); snake_case also accepted on input

Design Decisions:
    - One set of field models shared by both kinds, thin per-kind envelopes so the
      OpenAPI schema shows the real wrapper keys
    - from_attributes on DocumentOut: ORM documents validate directly
"""

from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from pairwork.core.remove_blank_fields import remove_blank_fields

PrincipalRef = Annotated[str, Field(min_length=1, max_length=64)]

# Stored NOT NULL; PATCH may omit them but never clear them
_NON_NULLABLE_ON_UPDATE = ("user1", "messages")


class MessageRecord(BaseModel):
    """Embedded message — free text plus the principal who wrote it."""
    content: str = Field(min_length=1, max_length=10_000)
    owner: PrincipalRef


class DocumentCreate(BaseModel):
    """Fields accepted on CREATE."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: str | None = Field(None, max_length=500)
    owner: str | None = None
    user1: PrincipalRef
    user2: PrincipalRef | None = None
    user1_email: str | None = Field(None, max_length=320)
    user2_email: str | None = Field(None, max_length=320)
    messages: list[MessageRecord] = Field(default_factory=list)


class DocumentUpdate(BaseModel):
    """Fields accepted on UPDATE — all optional, owner deliberately absent."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: str | None = Field(None, max_length=500)
    user1: PrincipalRef | None = None
    user2: PrincipalRef | None = None
    user1_email: str | None = Field(None, max_length=320)
    user2_email: str | None = Field(None, max_length=320)
    messages: list[MessageRecord] | None = None

    @model_validator(mode="after")
    def reject_null_required_fields(self):
        for name in _NON_NULLABLE_ON_UPDATE:
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{name} cannot be null")
        return self


class DocumentOut(BaseModel):
    """Serialized document; unset optionals are dropped by the route."""
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True,
    )

    id: str
    title: str | None = None
    owner: str
    user1: str
    user2: str | None = None
    user1_email: str | None = None
    user2_email: str | None = None
    messages: list[MessageRecord] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime


class _BlankStrippingEnvelope(BaseModel):
    @model_validator(mode="before")
    @classmethod
    def strip_blank_fields(cls, data):
        return remove_blank_fields(data)


# --- Projects -----------------------------------------------------------------

class ProjectCreateRequest(BaseModel):
    project: DocumentCreate


class ProjectUpdateRequest(_BlankStrippingEnvelope):
    project: DocumentUpdate


class ProjectEnvelope(BaseModel):
    project: DocumentOut


class ProjectList(BaseModel):
    projects: list[DocumentOut]


# --- Chatrooms ----------------------------------------------------------------

class ChatroomCreateRequest(BaseModel):
    chatroom: DocumentCreate


class ChatroomUpdateRequest(_BlankStrippingEnvelope):
    chatroom: DocumentUpdate


class ChatroomEnvelope(BaseModel):
    chatroom: DocumentOut


class ChatroomList(BaseModel):
    chatrooms: list[DocumentOut]
