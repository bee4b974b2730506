"""ContributionRepository - concrete implementation of ContributionRepositoryProtocol.

All queries use raw text() SQL. Every statement that returns a contribution
joins its venue so callers get the stored record with its venue relation.

Transaction ownership: the CALLER starts and commits the transaction via
`async with db.begin()`.
"""

from datetime import datetime
from decimal import Decimal

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from src.jp_common.enums import GameVariant
from src.jp_common.errors import InternalError
from src.jp_common.money import to_decimal
from src.jp_contribution.domain.models import Contribution
from src.jp_contribution.domain.splitter import ContributionSplit
from src.jp_venue.domain.models import Venue

# ---------------------------------------------------------------------------
# SQL
# ---------------------------------------------------------------------------

_COLUMNS = """
    c.id, c.occurred_at, c.venue_id, c.variant,
    c.gross_amount, c.withheld_amount, c.jackpot_contribution,
    c.manager, c.created_at, c.updated_at,
    v.name AS venue_name, v.standard_withdrawal AS venue_standard_withdrawal
"""

_INSERT_SQL = text(f"""
    WITH c AS (
        INSERT INTO contributions
            (occurred_at, venue_id, variant,
             gross_amount, withheld_amount, jackpot_contribution, manager)
        VALUES
            (:occurred_at, :venue_id, :variant,
             :gross_amount, :withheld_amount, :jackpot_contribution, :manager)
        RETURNING *
    )
    SELECT {_COLUMNS}
    FROM c JOIN venues v ON v.id = c.venue_id
""")

_GET_SQL = text(f"""
    SELECT {_COLUMNS}
    FROM contributions c JOIN venues v ON v.id = c.venue_id
    WHERE c.id = :contribution_id
""")

_GET_FOR_UPDATE_SQL = text(f"""
    SELECT {_COLUMNS}
    FROM contributions c JOIN venues v ON v.id = c.venue_id
    WHERE c.id = :contribution_id
    FOR UPDATE OF c
""")

_UPDATE_SQL = text(f"""
    WITH c AS (
        UPDATE contributions
        SET variant = :variant,
            gross_amount = :gross_amount,
            withheld_amount = :withheld_amount,
            jackpot_contribution = :jackpot_contribution,
            updated_at = NOW()
        WHERE id = :contribution_id
        RETURNING *
    )
    SELECT {_COLUMNS}
    FROM c JOIN venues v ON v.id = c.venue_id
""")

_LIST_SQL = text(f"""
    SELECT {_COLUMNS}
    FROM contributions c JOIN venues v ON v.id = c.venue_id
    ORDER BY c.occurred_at DESC, c.id DESC
""")

# ---------------------------------------------------------------------------
# Row mappers
# ---------------------------------------------------------------------------


def _row_to_contribution(row: object) -> Contribution:
    return Contribution(
        id=row.id,  # type: ignore[attr-defined]
        occurred_at=row.occurred_at,  # type: ignore[attr-defined]
        venue_id=row.venue_id,  # type: ignore[attr-defined]
        variant=GameVariant.normalize(row.variant),  # type: ignore[attr-defined]
        gross_amount=to_decimal(row.gross_amount),  # type: ignore[attr-defined]
        withheld_amount=to_decimal(row.withheld_amount),  # type: ignore[attr-defined]
        jackpot_contribution=to_decimal(row.jackpot_contribution),  # type: ignore[attr-defined]
        manager=row.manager,  # type: ignore[attr-defined]
        venue=Venue(
            id=row.venue_id,  # type: ignore[attr-defined]
            name=row.venue_name,  # type: ignore[attr-defined]
            standard_withdrawal=to_decimal(row.venue_standard_withdrawal),  # type: ignore[attr-defined]
        ),
        created_at=row.created_at,  # type: ignore[attr-defined]
        updated_at=row.updated_at,  # type: ignore[attr-defined]
    )


# ---------------------------------------------------------------------------
# Repository
# ---------------------------------------------------------------------------


class ContributionRepository:
    async def insert_contribution(
        self,
        db: AsyncSession,
        venue_id: int,
        occurred_at: datetime,
        variant: GameVariant,
        gross_amount: Decimal,
        split: ContributionSplit,
        manager: str,
    ) -> Contribution:
        result = await db.execute(
            _INSERT_SQL,
            {
                "occurred_at": occurred_at,
                "venue_id": venue_id,
                "variant": variant.value,
                "gross_amount": gross_amount,
                "withheld_amount": split.withheld_amount,
                "jackpot_contribution": split.jackpot_contribution,
                "manager": manager,
            },
        )
        row = result.fetchone()
        if row is None:
            raise InternalError("Contribution insert returned no rows")
        return _row_to_contribution(row)

    async def get_contribution_by_id(
        self, db: AsyncSession, contribution_id: int, for_update: bool = False
    ) -> Contribution | None:
        sql = _GET_FOR_UPDATE_SQL if for_update else _GET_SQL
        result = await db.execute(sql, {"contribution_id": contribution_id})
        row = result.fetchone()
        return _row_to_contribution(row) if row else None

    async def update_contribution(
        self,
        db: AsyncSession,
        contribution_id: int,
        variant: GameVariant,
        gross_amount: Decimal,
        split: ContributionSplit,
    ) -> Contribution:
        result = await db.execute(
            _UPDATE_SQL,
            {
                "contribution_id": contribution_id,
                "variant": variant.value,
                "gross_amount": gross_amount,
                "withheld_amount": split.withheld_amount,
                "jackpot_contribution": split.jackpot_contribution,
            },
        )
        row = result.fetchone()
        if row is None:
            raise InternalError(f"Contribution {contribution_id} vanished during update")
        return _row_to_contribution(row)

    async def list_contributions(self, db: AsyncSession) -> list[Contribution]:
        result = await db.execute(_LIST_SQL)
        return [_row_to_contribution(row) for row in result.fetchall()]
