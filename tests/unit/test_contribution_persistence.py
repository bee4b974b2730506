# tests/unit/test_contribution_persistence.py
"""Unit tests for ContributionRepository and EventRepository using MagicMock AsyncSession."""
from datetime import UTC, datetime
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

import pytest

from src.jp_common.enums import GameVariant
from src.jp_common.errors import InternalError
from src.jp_contribution.domain.splitter import split_contribution
from src.jp_contribution.infrastructure.persistence import ContributionRepository
from src.jp_event.infrastructure.persistence import EventRepository


def _make_contribution_row(**kwargs):
    """Build a mock DB row with all required fields."""
    row = MagicMock()
    row.id = kwargs.get("id", 1)
    row.occurred_at = datetime.now(UTC)
    row.venue_id = kwargs.get("venue_id", 1)
    row.variant = kwargs.get("variant", "Texas")
    row.gross_amount = kwargs.get("gross_amount", Decimal("1200"))
    row.withheld_amount = kwargs.get("withheld_amount", Decimal("500"))
    row.jackpot_contribution = kwargs.get("jackpot_contribution", Decimal("700"))
    row.manager = "gerente"
    row.created_at = datetime.now(UTC)
    row.updated_at = datetime.now(UTC)
    row.venue_name = "Alphaville"
    row.venue_standard_withdrawal = Decimal("500")
    return row


def _result(one=None, many=None):
    result_mock = MagicMock()
    result_mock.fetchone.return_value = one
    result_mock.fetchall.return_value = many or []
    return result_mock


@pytest.fixture
def db():
    return MagicMock()


class TestInsertContribution:
    async def test_maps_returned_row(self, db):
        db.execute = AsyncMock(return_value=_result(one=_make_contribution_row(id=5)))
        repo = ContributionRepository()

        contribution = await repo.insert_contribution(
            db,
            venue_id=1,
            occurred_at=datetime.now(UTC),
            variant=GameVariant.TEXAS,
            gross_amount=Decimal("1200"),
            split=split_contribution(Decimal("1200"), Decimal("500")),
            manager="gerente",
        )

        assert contribution.id == 5
        assert contribution.jackpot_contribution == Decimal("700")
        assert contribution.venue is not None
        assert contribution.venue.name == "Alphaville"
        params = db.execute.call_args[0][1]
        assert params["variant"] == "Texas"
        assert params["withheld_amount"] == Decimal("500")
        assert params["jackpot_contribution"] == Decimal("700")

    async def test_no_row_raises_internal_error(self, db):
        db.execute = AsyncMock(return_value=_result(one=None))
        repo = ContributionRepository()

        with pytest.raises(InternalError):
            await repo.insert_contribution(
                db,
                venue_id=1,
                occurred_at=datetime.now(UTC),
                variant=GameVariant.TEXAS,
                gross_amount=Decimal("1"),
                split=split_contribution(Decimal("1"), Decimal("0")),
                manager="gerente",
            )


class TestGetContribution:
    async def test_found(self, db):
        db.execute = AsyncMock(return_value=_result(one=_make_contribution_row(variant="Omaha")))
        repo = ContributionRepository()

        contribution = await repo.get_contribution_by_id(db, 1)

        assert contribution is not None
        assert contribution.variant is GameVariant.OMAHA

    async def test_not_found(self, db):
        db.execute = AsyncMock(return_value=_result(one=None))
        repo = ContributionRepository()

        assert await repo.get_contribution_by_id(db, 404) is None

    async def test_for_update_locks_the_row(self, db):
        db.execute = AsyncMock(return_value=_result(one=_make_contribution_row()))
        repo = ContributionRepository()

        await repo.get_contribution_by_id(db, 1, for_update=True)

        assert "FOR UPDATE OF c" in str(db.execute.call_args[0][0])

    async def test_plain_get_does_not_lock(self, db):
        db.execute = AsyncMock(return_value=_result(one=_make_contribution_row()))
        repo = ContributionRepository()

        await repo.get_contribution_by_id(db, 1)

        assert "FOR UPDATE" not in str(db.execute.call_args[0][0])


class TestUpdateAndList:
    async def test_update_passes_recomputed_split(self, db):
        db.execute = AsyncMock(return_value=_result(one=_make_contribution_row()))
        repo = ContributionRepository()

        await repo.update_contribution(
            db,
            1,
            variant=GameVariant.OMAHA,
            gross_amount=Decimal("800"),
            split=split_contribution(Decimal("800"), Decimal("500")),
        )

        params = db.execute.call_args[0][1]
        assert params == {
            "contribution_id": 1,
            "variant": "Omaha",
            "gross_amount": Decimal("800"),
            "withheld_amount": Decimal("500"),
            "jackpot_contribution": Decimal("300"),
        }

    async def test_update_vanished_row_raises(self, db):
        db.execute = AsyncMock(return_value=_result(one=None))
        repo = ContributionRepository()

        with pytest.raises(InternalError):
            await repo.update_contribution(
                db,
                1,
                variant=GameVariant.TEXAS,
                gross_amount=Decimal("1"),
                split=split_contribution(Decimal("1"), Decimal("0")),
            )

    async def test_list_maps_rows_and_normalizes_variant(self, db):
        rows = [_make_contribution_row(id=i, variant=v) for i, v in [(2, "Omaha"), (1, "texas")]]
        db.execute = AsyncMock(return_value=_result(many=rows))
        repo = ContributionRepository()

        result = await repo.list_contributions(db)

        assert [c.id for c in result] == [2, 1]
        assert [c.variant for c in result] == [GameVariant.OMAHA, GameVariant.TEXAS]


class TestEventRepository:
    async def test_list_withdrawals(self, db):
        row = MagicMock()
        row.contribution_id = 10
        row.occurred_at = datetime.now(UTC)
        row.venue_id = 2
        row.venue_name = "Jd. América"
        row.withheld_amount = Decimal("750")
        db.execute = AsyncMock(return_value=_result(many=[row]))

        [withdrawal] = await EventRepository().list_withdrawals(db)

        assert withdrawal.contribution_id == 10
        assert withdrawal.withheld_amount == Decimal("750")

    async def test_insert_write_off(self, db):
        row = MagicMock()
        row.id = 3
        row.occurred_at = datetime.now(UTC)
        row.venue_id = 2
        row.amount = Decimal("320")
        row.note = None
        row.created_at = datetime.now(UTC)
        row.venue_name = "Jd. América"
        row.venue_standard_withdrawal = Decimal("750")
        db.execute = AsyncMock(return_value=_result(one=row))

        write_off = await EventRepository().insert_write_off(
            db, venue_id=2, occurred_at=datetime.now(UTC), amount=Decimal("320"), note=None
        )

        assert write_off.id == 3
        assert write_off.venue is not None
        assert write_off.venue.standard_withdrawal == Decimal("750")
        assert db.execute.call_args[0][1]["note"] is None
