"""003: create contributions table

Revision ID: 003
Revises: 002
Create Date: 2025-09-04
"""
from typing import Sequence, Union
from alembic import op

revision: str = "003"
down_revision: Union[str, None] = "002"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.execute("""
        CREATE TABLE contributions (
            id                      BIGSERIAL       PRIMARY KEY,
            occurred_at             TIMESTAMPTZ     NOT NULL DEFAULT NOW(),
            venue_id                BIGINT          NOT NULL REFERENCES venues (id),
            variant                 VARCHAR(10)     NOT NULL,
            gross_amount            NUMERIC         NOT NULL,
            withheld_amount         NUMERIC         NOT NULL,
            jackpot_contribution    NUMERIC         NOT NULL,
            manager                 VARCHAR(120)    NOT NULL,
            created_at              TIMESTAMPTZ     NOT NULL DEFAULT NOW(),
            updated_at              TIMESTAMPTZ     NOT NULL DEFAULT NOW(),
            CONSTRAINT ck_contributions_variant CHECK (variant IN ('Texas', 'Omaha')),
            CONSTRAINT ck_contributions_amounts_gte_0 CHECK (
                withheld_amount >= 0 AND jackpot_contribution >= 0
            )
        );
    """)
    op.execute(
        "CREATE INDEX idx_contributions_venue_variant ON contributions (venue_id, variant);"
    )
    op.execute("CREATE INDEX idx_contributions_occurred_at ON contributions (occurred_at DESC);")
    op.execute("""
        CREATE TRIGGER trg_contributions_updated_at
            BEFORE UPDATE ON contributions
            FOR EACH ROW EXECUTE FUNCTION fn_touch_updated_at();
    """)
    op.execute("COMMENT ON TABLE contributions IS 'Entradas - money collected per event, split withheld/jackpot';")


def downgrade() -> None:
    op.execute("DROP TABLE IF EXISTS contributions CASCADE;")
