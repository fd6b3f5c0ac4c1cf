"""Create users and pantry tables

Revision ID: 4f2a9c1d7e3b
Revises:
Create Date: 2026-10-17 10:12:44.190221

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "4f2a9c1d7e3b"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
    ]


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=True),
        sa.Column("last_login_at", sa.DateTime(timezone=True), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_users_id"), "users", ["id"], unique=False)
    op.create_index(op.f("ix_users_email"), "users", ["email"], unique=True)

    op.create_table(
        "food_items",
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("expiration_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("quantity", sa.Integer(), nullable=False),
        sa.Column("image_url", sa.String(length=2048), nullable=True),
        sa.Column("keywords", sa.JSON(), nullable=False),
        sa.Column("placement", sa.String(length=255), nullable=False),
        sa.Column("hidden", sa.Boolean(), server_default=sa.false(), nullable=False),
        *_timestamps(),
        sa.CheckConstraint("quantity > 0", name="ck_food_items_quantity_positive"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_food_items_expiration_date"), "food_items", ["expiration_date"], unique=False
    )
    op.create_index(op.f("ix_food_items_hidden"), "food_items", ["hidden"], unique=False)

    op.create_table(
        "food_categories",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=100), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name"),
    )
    op.create_index(op.f("ix_food_categories_id"), "food_categories", ["id"], unique=False)

    op.create_table(
        "food_category_on_food_items",
        sa.Column("food_item_id", sa.String(length=36), nullable=False),
        sa.Column("food_category_id", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["food_item_id"], ["food_items.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["food_category_id"], ["food_categories.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("food_item_id", "food_category_id"),
    )
    op.create_index(
        op.f("ix_food_category_on_food_items_food_category_id"),
        "food_category_on_food_items",
        ["food_category_id"],
        unique=False,
    )


def downgrade() -> None:
    op.drop_index(
        op.f("ix_food_category_on_food_items_food_category_id"),
        table_name="food_category_on_food_items",
    )
    op.drop_table("food_category_on_food_items")
    op.drop_index(op.f("ix_food_categories_id"), table_name="food_categories")
    op.drop_table("food_categories")
    op.drop_index(op.f("ix_food_items_hidden"), table_name="food_items")
    op.drop_index(op.f("ix_food_items_expiration_date"), table_name="food_items")
    op.drop_table("food_items")
    op.drop_index(op.f("ix_users_email"), table_name="users")
    op.drop_index(op.f("ix_users_id"), table_name="users")
    op.drop_table("users")
