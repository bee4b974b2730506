"""JackpotRepository - ledger lines for the balance folds.

All queries use raw text() SQL and are read-only.
asyncpg NULL parameter pattern: CAST(:param AS TYPE) IS NULL required for None values.
"""

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from src.jp_common.enums import GameVariant
from src.jp_common.money import to_decimal
from src.jp_jackpot.domain.models import LedgerLine

# ---------------------------------------------------------------------------
# SQL
# ---------------------------------------------------------------------------

# One (venue, variant) key; optionally without one payout (recompute on edit).
_KEY_LINES_SQL = text("""
    SELECT c.venue_id, c.variant, COALESCE(c.jackpot_contribution, 0) AS amount
    FROM contributions c
    WHERE c.venue_id = :venue_id AND c.variant = :variant
    UNION ALL
    SELECT p.venue_id, p.variant, -COALESCE(p.payout_amount, 0) AS amount
    FROM payouts p
    WHERE p.venue_id = :venue_id AND p.variant = :variant
      AND (
          CAST(:exclude_payout_id AS BIGINT) IS NULL
          OR p.id <> CAST(:exclude_payout_id AS BIGINT)
      )
""")

# Whole table, pre-summed per key and joined to the venue name.
_ALL_LINES_SQL = text("""
    SELECT l.venue_id, v.name AS venue_name, l.variant, SUM(l.amount) AS amount
    FROM (
        SELECT venue_id, variant, COALESCE(jackpot_contribution, 0) AS amount
        FROM contributions
        UNION ALL
        SELECT venue_id, variant, -COALESCE(payout_amount, 0) AS amount
        FROM payouts
    ) l
    JOIN venues v ON v.id = l.venue_id
    GROUP BY l.venue_id, v.name, l.variant
""")


def _row_to_line(row: object, with_name: bool = False) -> LedgerLine:
    return LedgerLine(
        venue_id=row.venue_id,  # type: ignore[attr-defined]
        variant=GameVariant.normalize(row.variant),  # type: ignore[attr-defined]
        amount=to_decimal(row.amount),  # type: ignore[attr-defined]
        venue_name=row.venue_name if with_name else "",  # type: ignore[attr-defined]
    )


class JackpotRepository:
    async def list_ledger_lines(
        self,
        db: AsyncSession,
        venue_id: int,
        variant: GameVariant,
        exclude_payout_id: int | None = None,
    ) -> list[LedgerLine]:
        result = await db.execute(
            _KEY_LINES_SQL,
            {
                "venue_id": venue_id,
                "variant": variant.value,
                "exclude_payout_id": exclude_payout_id,
            },
        )
        return [_row_to_line(row) for row in result.fetchall()]

    async def list_all_ledger_lines(self, db: AsyncSession) -> list[LedgerLine]:
        result = await db.execute(_ALL_LINES_SQL)
        return [_row_to_line(row, with_name=True) for row in result.fetchall()]
