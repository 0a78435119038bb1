"""Initial schema - role_assignment, role_latest_grant, role_event.

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""

from collections.abc import Sequence

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None

# uint256 and uint64 do not fit BIGINT
TOKEN_ID = sa.Numeric(78, 0)
TIMESTAMP_U64 = sa.Numeric(20, 0)


def upgrade() -> None:
    op.create_table(
        "role_assignment",
        sa.Column("role", sa.LargeBinary(), nullable=False),
        sa.Column("grantor", sa.String(255), nullable=False),
        sa.Column("grantee", sa.String(255), nullable=False),
        sa.Column("token_address", sa.String(255), nullable=False),
        sa.Column("token_id", TOKEN_ID, nullable=False),
        sa.Column("expiration_date", TIMESTAMP_U64, nullable=False),
        sa.Column("data", sa.LargeBinary(), nullable=False, server_default=sa.text("''::bytea")),
        sa.Column("granted_at", sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("role", "grantor", "grantee", "token_address", "token_id"),
        sa.CheckConstraint("octet_length(role) = 32", name="ck_role_assignment_role_len"),
    )
    op.create_index(
        "ix_role_assignment_token",
        "role_assignment",
        ["token_address", "token_id"],
    )

    op.create_table(
        "role_latest_grant",
        sa.Column("role", sa.LargeBinary(), nullable=False),
        sa.Column("grantor", sa.String(255), nullable=False),
        sa.Column("token_address", sa.String(255), nullable=False),
        sa.Column("token_id", TOKEN_ID, nullable=False),
        sa.Column("grantee", sa.String(255), nullable=False),
        sa.PrimaryKeyConstraint("role", "grantor", "token_address", "token_id"),
    )

    op.create_table(
        "role_event",
        sa.Column("id", sa.BigInteger(), sa.Identity(always=False), primary_key=True),
        sa.Column("event_type", sa.String(32), nullable=False),
        sa.Column("role", sa.LargeBinary(), nullable=False),
        sa.Column("token_address", sa.String(255), nullable=False),
        sa.Column("token_id", TOKEN_ID, nullable=False),
        sa.Column("grantor", sa.String(255), nullable=False),
        sa.Column("grantee", sa.String(255), nullable=False),
        sa.Column("expiration_date", TIMESTAMP_U64, nullable=True),
        sa.Column("data", sa.LargeBinary(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_role_event_role", "role_event", ["role", "id"])
    op.create_index("ix_role_event_token", "role_event", ["token_address", "token_id", "id"])


def downgrade() -> None:
    op.drop_index("ix_role_event_token", table_name="role_event")
    op.drop_index("ix_role_event_role", table_name="role_event")
    op.drop_table("role_event")
    op.drop_table("role_latest_grant")
    op.drop_index("ix_role_assignment_token", table_name="role_assignment")
    op.drop_table("role_assignment")
