"""002: create venues table

Revision ID: 002
Revises: 001
Create Date: 2025-09-04
"""
from typing import Sequence, Union
from alembic import op

revision: str = "002"
down_revision: Union[str, None] = "001"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.execute("""
        CREATE TABLE venues (
            id                      BIGSERIAL       PRIMARY KEY,
            name                    VARCHAR(120)    NOT NULL UNIQUE,
            standard_withdrawal     NUMERIC         NOT NULL DEFAULT 0,
            created_at              TIMESTAMPTZ     NOT NULL DEFAULT NOW(),
            CONSTRAINT ck_venues_standard_withdrawal_gte_0 CHECK (standard_withdrawal >= 0)
        );
    """)
    op.execute("COMMENT ON TABLE venues IS 'Sedes - each has one jackpot pool per variant';")


def downgrade() -> None:
    op.execute("DROP TABLE IF EXISTS venues CASCADE;")
