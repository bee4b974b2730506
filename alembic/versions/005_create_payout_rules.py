"""005: create payout_rules table

Revision ID: 005
Revises: 004
Create Date: 2025-09-04
"""
from typing import Sequence, Union
from alembic import op

revision: str = "005"
down_revision: Union[str, None] = "004"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.execute("""
        CREATE TABLE payout_rules (
            id                      BIGSERIAL       PRIMARY KEY,
            variant                 VARCHAR(10)     NOT NULL,
            table_label             VARCHAR(32)     NOT NULL,
            hand_label              VARCHAR(64)     NOT NULL,
            kind                    VARCHAR(12)     NOT NULL,
            value                   NUMERIC         NOT NULL,
            CONSTRAINT uq_payout_rules_key UNIQUE (variant, table_label, hand_label),
            CONSTRAINT ck_payout_rules_variant CHECK (variant IN ('Texas', 'Omaha')),
            CONSTRAINT ck_payout_rules_kind CHECK (kind IN ('FIXED', 'PERCENTAGE')),
            CONSTRAINT ck_payout_rules_value CHECK (
                value >= 0 AND (kind = 'FIXED' OR value <= 1)
            )
        );
    """)
    op.execute("COMMENT ON TABLE payout_rules IS 'Premiação - (variant, blind, hand) -> fixed amount or pool fraction';")


def downgrade() -> None:
    op.execute("DROP TABLE IF EXISTS payout_rules CASCADE;")
