"""Payout and payout-rule repositories.

PayoutRuleRepository reads the seeded rule table through the ORM model.
PayoutRepository uses raw text() SQL; every statement that returns a payout
joins its venue.

Transaction ownership: the CALLER starts and commits the transaction via
`async with db.begin()`.
"""

from datetime import datetime
from decimal import Decimal

from sqlalchemy import select, text
from sqlalchemy.ext.asyncio import AsyncSession

from src.jp_common.enums import GameVariant, RuleKind
from src.jp_common.errors import InternalError
from src.jp_common.money import to_decimal
from src.jp_payout.domain.models import (
    FixedPrize,
    Payout,
    PayoutRule,
    PercentagePrize,
    Prize,
    RuleKey,
)
from src.jp_payout.infrastructure.db_models import PayoutRuleModel
from src.jp_venue.domain.models import Venue

# ---------------------------------------------------------------------------
# Payout rules
# ---------------------------------------------------------------------------


def _model_to_rule(model: PayoutRuleModel) -> PayoutRule:
    value = to_decimal(model.value)
    prize: Prize = FixedPrize(value) if model.kind == RuleKind.FIXED.value else PercentagePrize(value)
    return PayoutRule(
        id=model.id,
        key=RuleKey(
            variant=GameVariant.normalize(model.variant),
            table_label=model.table_label,
            hand_label=model.hand_label,
        ),
        prize=prize,
    )


class PayoutRuleRepository:
    async def get_rule(self, db: AsyncSession, key: RuleKey) -> PayoutRule | None:
        result = await db.execute(
            select(PayoutRuleModel).where(
                PayoutRuleModel.variant == key.variant.value,
                PayoutRuleModel.table_label == key.table_label,
                PayoutRuleModel.hand_label == key.hand_label,
            )
        )
        model = result.scalar_one_or_none()
        return _model_to_rule(model) if model else None

    async def list_rules(self, db: AsyncSession) -> list[PayoutRule]:
        result = await db.execute(
            select(PayoutRuleModel).order_by(
                PayoutRuleModel.variant,
                PayoutRuleModel.table_label,
                PayoutRuleModel.hand_label,
            )
        )
        return [_model_to_rule(m) for m in result.scalars().all()]


# ---------------------------------------------------------------------------
# Payout SQL
# ---------------------------------------------------------------------------

_COLUMNS = """
    p.id, p.occurred_at, p.time_of_day, p.venue_id, p.variant,
    p.table_label, p.hand_label, p.player_label,
    p.applied_percentage, p.payout_amount, p.done, p.manager,
    p.created_at, p.updated_at,
    v.name AS venue_name, v.standard_withdrawal AS venue_standard_withdrawal
"""

_INSERT_SQL = text(f"""
    WITH p AS (
        INSERT INTO payouts
            (occurred_at, time_of_day, venue_id, variant, table_label, hand_label,
             player_label, applied_percentage, payout_amount, done, manager)
        VALUES
            (:occurred_at, :time_of_day, :venue_id, :variant, :table_label, :hand_label,
             :player_label, :applied_percentage, :payout_amount, :done, :manager)
        RETURNING *
    )
    SELECT {_COLUMNS}
    FROM p JOIN venues v ON v.id = p.venue_id
""")

_GET_SQL = text(f"""
    SELECT {_COLUMNS}
    FROM payouts p JOIN venues v ON v.id = p.venue_id
    WHERE p.id = :payout_id
""")

_GET_FOR_UPDATE_SQL = text(f"""
    SELECT {_COLUMNS}
    FROM payouts p JOIN venues v ON v.id = p.venue_id
    WHERE p.id = :payout_id
    FOR UPDATE OF p
""")

_UPDATE_SQL = text(f"""
    WITH p AS (
        UPDATE payouts
        SET variant = :variant,
            table_label = :table_label,
            hand_label = :hand_label,
            applied_percentage = :applied_percentage,
            payout_amount = :payout_amount,
            updated_at = NOW()
        WHERE id = :payout_id
        RETURNING *
    )
    SELECT {_COLUMNS}
    FROM p JOIN venues v ON v.id = p.venue_id
""")

_LIST_SQL = text(f"""
    SELECT {_COLUMNS}
    FROM payouts p JOIN venues v ON v.id = p.venue_id
    WHERE (CAST(:venue_id AS BIGINT) IS NULL OR p.venue_id = CAST(:venue_id AS BIGINT))
    ORDER BY p.occurred_at DESC, p.id DESC
    LIMIT :limit
""")


def _row_to_payout(row: object) -> Payout:
    applied = row.applied_percentage  # type: ignore[attr-defined]
    return Payout(
        id=row.id,  # type: ignore[attr-defined]
        occurred_at=row.occurred_at,  # type: ignore[attr-defined]
        time_of_day=row.time_of_day,  # type: ignore[attr-defined]
        venue_id=row.venue_id,  # type: ignore[attr-defined]
        variant=GameVariant.normalize(row.variant),  # type: ignore[attr-defined]
        table_label=row.table_label,  # type: ignore[attr-defined]
        hand_label=row.hand_label,  # type: ignore[attr-defined]
        player_label=row.player_label,  # type: ignore[attr-defined]
        applied_percentage=to_decimal(applied) if applied is not None else None,
        payout_amount=to_decimal(row.payout_amount),  # type: ignore[attr-defined]
        done=bool(row.done),  # type: ignore[attr-defined]
        manager=row.manager,  # type: ignore[attr-defined]
        venue=Venue(
            id=row.venue_id,  # type: ignore[attr-defined]
            name=row.venue_name,  # type: ignore[attr-defined]
            standard_withdrawal=to_decimal(row.venue_standard_withdrawal),  # type: ignore[attr-defined]
        ),
        created_at=row.created_at,  # type: ignore[attr-defined]
        updated_at=row.updated_at,  # type: ignore[attr-defined]
    )


class PayoutRepository:
    async def insert_payout(
        self,
        db: AsyncSession,
        venue_id: int,
        occurred_at: datetime,
        time_of_day: str | None,
        variant: GameVariant,
        table_label: str,
        hand_label: str,
        player_label: str,
        applied_percentage: Decimal | None,
        payout_amount: Decimal,
        done: bool,
        manager: str,
    ) -> Payout:
        result = await db.execute(
            _INSERT_SQL,
            {
                "occurred_at": occurred_at,
                "time_of_day": time_of_day,
                "venue_id": venue_id,
                "variant": variant.value,
                "table_label": table_label,
                "hand_label": hand_label,
                "player_label": player_label,
                "applied_percentage": applied_percentage,
                "payout_amount": payout_amount,
                "done": done,
                "manager": manager,
            },
        )
        row = result.fetchone()
        if row is None:
            raise InternalError("Payout insert returned no rows")
        return _row_to_payout(row)

    async def get_payout_by_id(
        self, db: AsyncSession, payout_id: int, for_update: bool = False
    ) -> Payout | None:
        sql = _GET_FOR_UPDATE_SQL if for_update else _GET_SQL
        result = await db.execute(sql, {"payout_id": payout_id})
        row = result.fetchone()
        return _row_to_payout(row) if row else None

    async def update_payout(
        self,
        db: AsyncSession,
        payout_id: int,
        variant: GameVariant,
        table_label: str,
        hand_label: str,
        applied_percentage: Decimal | None,
        payout_amount: Decimal,
    ) -> Payout:
        result = await db.execute(
            _UPDATE_SQL,
            {
                "payout_id": payout_id,
                "variant": variant.value,
                "table_label": table_label,
                "hand_label": hand_label,
                "applied_percentage": applied_percentage,
                "payout_amount": payout_amount,
            },
        )
        row = result.fetchone()
        if row is None:
            raise InternalError(f"Payout {payout_id} vanished during update")
        return _row_to_payout(row)

    async def list_payouts(
        self, db: AsyncSession, venue_id: int | None = None, limit: int | None = None
    ) -> list[Payout]:
        # LIMIT NULL means no limit in PostgreSQL
        result = await db.execute(_LIST_SQL, {"venue_id": venue_id, "limit": limit})
        return [_row_to_payout(row) for row in result.fetchall()]
