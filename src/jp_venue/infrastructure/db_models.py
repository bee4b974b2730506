"""SQLAlchemy ORM model for the venues table.

Table is created by Alembic migration: alembic/versions/002_create_venues.py
No new migration needed - this file is a pure Python mapping.
"""

from datetime import datetime
from decimal import Decimal

from sqlalchemy import BigInteger, DateTime, Numeric, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from src.jp_common.database import Base


class VenueModel(Base):
    __tablename__ = "venues"

    id: Mapped[int] = mapped_column(BigInteger, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(Text, nullable=False, unique=True)
    standard_withdrawal: Mapped[Decimal] = mapped_column(Numeric, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=text("NOW()")
    )
