"""006: create event_write_offs table

Revision ID: 006
Revises: 005
Create Date: 2025-09-10
"""
from typing import Sequence, Union
from alembic import op

revision: str = "006"
down_revision: Union[str, None] = "005"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.execute("""
        CREATE TABLE event_write_offs (
            id                      BIGSERIAL       PRIMARY KEY,
            occurred_at             TIMESTAMPTZ     NOT NULL DEFAULT NOW(),
            venue_id                BIGINT          NOT NULL REFERENCES venues (id),
            amount                  NUMERIC         NOT NULL,
            note                    VARCHAR(500),
            created_at              TIMESTAMPTZ     NOT NULL DEFAULT NOW(),
            CONSTRAINT ck_event_write_offs_amount_gte_0 CHECK (amount >= 0)
        );
    """)
    op.execute("CREATE INDEX idx_event_write_offs_occurred_at ON event_write_offs (occurred_at DESC);")


def downgrade() -> None:
    op.execute("DROP TABLE IF EXISTS event_write_offs CASCADE;")
