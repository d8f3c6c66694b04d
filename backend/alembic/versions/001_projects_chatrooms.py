"""Initial schema — projects and chatrooms document collections.

Revision ID: 001_projects_chatrooms
Revises: None
Create Date: 2026-10-18

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_projects_chatrooms"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _document_columns() -> list[sa.Column]:
    return [
        sa.Column("id", sa.String(32), primary_key=True),
        sa.Column("title", sa.String(500), nullable=True),
        sa.Column("owner", sa.String(64), nullable=False),
        sa.Column("user1", sa.String(64), nullable=False),
        sa.Column("user2", sa.String(64), nullable=True),
        sa.Column("user1_email", sa.String(320), nullable=True, unique=True),
        sa.Column("user2_email", sa.String(320), nullable=True, unique=True),
        sa.Column("messages", sa.JSON, nullable=False, server_default="[]"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    ]


def upgrade() -> None:
    op.create_table("projects", *_document_columns())
    op.create_index("ix_projects_owner", "projects", ["owner"])
    op.create_table("chatrooms", *_document_columns())
    op.create_index("ix_chatrooms_owner", "chatrooms", ["owner"])


def downgrade() -> None:
    op.drop_index("ix_chatrooms_owner", table_name="chatrooms")
    op.drop_table("chatrooms")
    op.drop_index("ix_projects_owner", table_name="projects")
    op.drop_table("projects")
