"""SQLAlchemy ORM model for the payout_rules table.

Table is created by Alembic migration: alembic/versions/005_create_payout_rules.py
Payout records themselves are read/written with raw SQL (persistence.py).
"""

from decimal import Decimal

from sqlalchemy import BigInteger, Numeric, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from src.jp_common.database import Base


class PayoutRuleModel(Base):
    __tablename__ = "payout_rules"
    __table_args__ = (
        UniqueConstraint("variant", "table_label", "hand_label", name="uq_payout_rules_key"),
    )

    id: Mapped[int] = mapped_column(BigInteger, primary_key=True, autoincrement=True)
    variant: Mapped[str] = mapped_column(Text, nullable=False)
    table_label: Mapped[str] = mapped_column(Text, nullable=False)
    hand_label: Mapped[str] = mapped_column(Text, nullable=False)
    kind: Mapped[str] = mapped_column(Text, nullable=False)
    value: Mapped[Decimal] = mapped_column(Numeric, nullable=False)
