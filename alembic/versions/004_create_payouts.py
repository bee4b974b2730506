"""004: create payouts table

Revision ID: 004
Revises: 003
Create Date: 2025-09-04
"""
from typing import Sequence, Union
from alembic import op

revision: str = "004"
down_revision: Union[str, None] = "003"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.execute("""
        CREATE TABLE payouts (
            id                      BIGSERIAL       PRIMARY KEY,
            occurred_at             TIMESTAMPTZ     NOT NULL DEFAULT NOW(),
            time_of_day             VARCHAR(16),
            venue_id                BIGINT          NOT NULL REFERENCES venues (id),
            variant                 VARCHAR(10)     NOT NULL,
            table_label             VARCHAR(32)     NOT NULL,
            hand_label              VARCHAR(64)     NOT NULL,
            player_label            VARCHAR(120)    NOT NULL DEFAULT 'PREMIADO',
            applied_percentage      NUMERIC,
            payout_amount           NUMERIC         NOT NULL,
            done                    BOOLEAN         NOT NULL DEFAULT FALSE,
            manager                 VARCHAR(120)    NOT NULL,
            created_at              TIMESTAMPTZ     NOT NULL DEFAULT NOW(),
            updated_at              TIMESTAMPTZ     NOT NULL DEFAULT NOW(),
            CONSTRAINT ck_payouts_variant CHECK (variant IN ('Texas', 'Omaha')),
            CONSTRAINT ck_payouts_amount_gte_0 CHECK (payout_amount >= 0),
            CONSTRAINT ck_payouts_percentage_range CHECK (
                applied_percentage IS NULL
                OR (applied_percentage >= 0 AND applied_percentage <= 1)
            )
        );
    """)
    op.execute("CREATE INDEX idx_payouts_venue_variant ON payouts (venue_id, variant);")
    op.execute("CREATE INDEX idx_payouts_occurred_at ON payouts (occurred_at DESC);")
    op.execute("""
        CREATE TRIGGER trg_payouts_updated_at
            BEFORE UPDATE ON payouts
            FOR EACH ROW EXECUTE FUNCTION fn_touch_updated_at();
    """)
    op.execute("COMMENT ON TABLE payouts IS 'Saídas - prizes drawn from a (venue, variant) pool';")


def downgrade() -> None:
    op.execute("DROP TABLE IF EXISTS payouts CASCADE;")
