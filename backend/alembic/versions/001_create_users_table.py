"""Create users table

Revision ID: 001
Revises: None
Create Date: 2026-10-18 00:00:00.000000+00:00

What:  Creates the `users` table, one row per User aggregate.
How:   Identity columns with unique indexes on username and email; the
       subject/note tree lives in a JSON column (JSONB on PostgreSQL).

Rollback: downgrade() drops the table entirely (destructive — all data lost).
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column(
            "id",
            sa.Uuid(),
            nullable=False,
            comment="User identifier, generated on creation",
        ),
        sa.Column(
            "username",
            sa.String(255),
            nullable=False,
            comment="Globally unique user name",
        ),
        sa.Column(
            "email",
            sa.String(320),
            nullable=False,
            comment="Globally unique email address",
        ),
        sa.Column(
            "creation_date",
            sa.Date(),
            nullable=False,
            comment="Date the account was created",
        ),
        sa.Column(
            "subjects",
            sa.JSON().with_variant(postgresql.JSONB(), "postgresql"),
            nullable=False,
            comment="Embedded subjects with their notes, in insertion order",
        ),
        sa.PrimaryKeyConstraint("id"),
    )

    # Back up the service's uniqueness checks when two creates race
    op.create_index("ix_users_username", "users", ["username"], unique=True)
    op.create_index("ix_users_email", "users", ["email"], unique=True)


def downgrade() -> None:
    op.drop_index("ix_users_email", table_name="users")
    op.drop_index("ix_users_username", table_name="users")
    op.drop_table("users")
