"""create content_entities and key_value tables

Revision ID: 0001
Revises:
Create Date: 2026-10-19
"""

from alembic import op
import sqlalchemy as sa

revision = "0001"
down_revision = None
branch_labels = None
depends_on = None

def upgrade():
    op.create_table(
        "content_entities",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("entity_type", sa.String(length=32), nullable=False),
        sa.Column("bundle", sa.String(length=64), nullable=False),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("status", sa.Boolean(), nullable=False),
        sa.Column("path_alias", sa.Text(), nullable=True),
        sa.Column("field_values", sa.JSON(), nullable=False),
    )
    op.create_index("ix_content_entities_entity_type", "content_entities", ["entity_type"])
    op.create_table(
        "key_value",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("collection", sa.String(length=128), nullable=False),
        sa.Column("name", sa.String(length=128), nullable=False),
        sa.Column("value", sa.JSON(), nullable=True),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.UniqueConstraint("collection", "name", name="uq_key_value_collection_name"),
    )

def downgrade():
    op.drop_table("key_value")
    op.drop_index("ix_content_entities_entity_type", table_name="content_entities")
    op.drop_table("content_entities")
