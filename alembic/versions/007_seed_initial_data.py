"""007: seed venues and the payout rule table

Revision ID: 007
Revises: 006
Create Date: 2025-09-10
"""

from typing import Sequence, Union

from alembic import op

revision: str = "007"
down_revision: Union[str, None] = "006"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.execute("""
        INSERT INTO venues (name, standard_withdrawal) VALUES
            ('Alphaville', 500),
            ('Jd. América', 750);
    """)

    op.execute("""
        INSERT INTO payout_rules (variant, table_label, hand_label, kind, value) VALUES
            -- Texas: four of a kind pays a fixed prize per blind level
            ('Texas', '1-2',    'Quadra', 'FIXED', 50),
            ('Texas', '5-5',    'Quadra', 'FIXED', 200),
            ('Texas', '5-10',   'Quadra', 'FIXED', 500),
            ('Texas', '10-25+', 'Quadra', 'FIXED', 1000),
            -- Texas: straight flush / royal pay a share of the pool
            ('Texas', '1-2', 'Straight Flush',       'PERCENTAGE', 0.009),
            ('Texas', '1-2', 'Royal Straight Flush', 'PERCENTAGE', 0.025),
            ('Texas', '5-5', 'Straight Flush',       'PERCENTAGE', 0.0135),
            ('Texas', '5-5', 'Royal Straight Flush', 'PERCENTAGE', 0.0375),
            -- Omaha
            ('Omaha', '1-2', 'Straight Flush',       'PERCENTAGE', 0.012),
            ('Omaha', '1-2', 'Royal Straight Flush', 'PERCENTAGE', 0.035),
            ('Omaha', '5-5', 'Straight Flush',       'PERCENTAGE', 0.018),
            ('Omaha', '5-5', 'Royal Straight Flush', 'PERCENTAGE', 0.042);
    """)


def downgrade() -> None:
    op.execute("DELETE FROM payout_rules;")
    op.execute("DELETE FROM venues WHERE name IN ('Alphaville', 'Jd. América');")
