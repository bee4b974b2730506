"""EventRepository - withdrawal report and write-off records (raw text() SQL)."""

from datetime import datetime
from decimal import Decimal

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from src.jp_common.errors import InternalError
from src.jp_common.money import to_decimal
from src.jp_event.domain.models import EventWithdrawal, EventWriteOff
from src.jp_venue.domain.models import Venue

_LIST_WITHDRAWALS_SQL = text("""
    SELECT c.id AS contribution_id, c.occurred_at, c.venue_id,
           v.name AS venue_name, c.withheld_amount
    FROM contributions c JOIN venues v ON v.id = c.venue_id
    ORDER BY c.occurred_at DESC, c.id DESC
""")

_WRITE_OFF_COLUMNS = """
    w.id, w.occurred_at, w.venue_id, w.amount, w.note, w.created_at,
    v.name AS venue_name, v.standard_withdrawal AS venue_standard_withdrawal
"""

_LIST_WRITE_OFFS_SQL = text(f"""
    SELECT {_WRITE_OFF_COLUMNS}
    FROM event_write_offs w JOIN venues v ON v.id = w.venue_id
    ORDER BY w.occurred_at DESC, w.id DESC
""")

_INSERT_WRITE_OFF_SQL = text(f"""
    WITH w AS (
        INSERT INTO event_write_offs (occurred_at, venue_id, amount, note)
        VALUES (:occurred_at, :venue_id, :amount, :note)
        RETURNING *
    )
    SELECT {_WRITE_OFF_COLUMNS}
    FROM w JOIN venues v ON v.id = w.venue_id
""")


def _row_to_withdrawal(row: object) -> EventWithdrawal:
    return EventWithdrawal(
        contribution_id=row.contribution_id,  # type: ignore[attr-defined]
        occurred_at=row.occurred_at,  # type: ignore[attr-defined]
        venue_id=row.venue_id,  # type: ignore[attr-defined]
        venue_name=row.venue_name,  # type: ignore[attr-defined]
        withheld_amount=to_decimal(row.withheld_amount),  # type: ignore[attr-defined]
    )


def _row_to_write_off(row: object) -> EventWriteOff:
    return EventWriteOff(
        id=row.id,  # type: ignore[attr-defined]
        occurred_at=row.occurred_at,  # type: ignore[attr-defined]
        venue_id=row.venue_id,  # type: ignore[attr-defined]
        amount=to_decimal(row.amount),  # type: ignore[attr-defined]
        note=row.note,  # type: ignore[attr-defined]
        venue=Venue(
            id=row.venue_id,  # type: ignore[attr-defined]
            name=row.venue_name,  # type: ignore[attr-defined]
            standard_withdrawal=to_decimal(row.venue_standard_withdrawal),  # type: ignore[attr-defined]
        ),
        created_at=row.created_at,  # type: ignore[attr-defined]
    )


class EventRepository:
    async def list_withdrawals(self, db: AsyncSession) -> list[EventWithdrawal]:
        result = await db.execute(_LIST_WITHDRAWALS_SQL)
        return [_row_to_withdrawal(row) for row in result.fetchall()]

    async def list_write_offs(self, db: AsyncSession) -> list[EventWriteOff]:
        result = await db.execute(_LIST_WRITE_OFFS_SQL)
        return [_row_to_write_off(row) for row in result.fetchall()]

    async def insert_write_off(
        self,
        db: AsyncSession,
        venue_id: int,
        occurred_at: datetime,
        amount: Decimal,
        note: str | None,
    ) -> EventWriteOff:
        result = await db.execute(
            _INSERT_WRITE_OFF_SQL,
            {"occurred_at": occurred_at, "venue_id": venue_id, "amount": amount, "note": note},
        )
        row = result.fetchone()
        if row is None:
            raise InternalError("Write-off insert returned no rows")
        return _row_to_write_off(row)
