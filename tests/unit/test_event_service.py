"""Unit tests for EventApplicationService using a mock repository."""

from datetime import UTC, datetime
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

import pytest
from pydantic import ValidationError

from src.jp_common.errors import VenueNotFoundError
from src.jp_event.application.schemas import CreateWriteOffRequest, EventWriteOffOut
from src.jp_event.application.service import EventApplicationService
from src.jp_event.domain.models import EventWithdrawal, EventWriteOff
from src.jp_venue.application.service import VenueApplicationService
from src.jp_venue.domain.models import Venue

_VENUE = Venue(id=2, name="Jd. América", standard_withdrawal=Decimal("750"))


def _make_db() -> MagicMock:
    db = MagicMock()
    tx = MagicMock()
    tx.__aenter__ = AsyncMock(return_value=None)
    tx.__aexit__ = AsyncMock(return_value=False)
    db.begin.return_value = tx
    return db


def _venues(venue: Venue | None = _VENUE) -> VenueApplicationService:
    repo = AsyncMock()
    repo.lock_venue.return_value = venue
    return VenueApplicationService(repo=repo)


def _make_write_off(note: str | None = "Torneio de sábado") -> EventWriteOff:
    now = datetime.now(UTC)
    return EventWriteOff(
        id=3,
        occurred_at=now,
        venue_id=_VENUE.id,
        amount=Decimal("320.00"),
        note=note,
        venue=_VENUE,
        created_at=now,
    )


class TestListWithdrawals:
    async def test_maps_withheld_amounts(self) -> None:
        repo = AsyncMock()
        repo.list_withdrawals.return_value = [
            EventWithdrawal(
                contribution_id=10,
                occurred_at=datetime.now(UTC),
                venue_id=2,
                venue_name="Jd. América",
                withheld_amount=Decimal("750"),
            )
        ]
        svc = EventApplicationService(repo=repo, venues=_venues())

        result = await svc.list_withdrawals(MagicMock())

        [row] = result.items
        assert row.contribution_id == 10
        assert row.venue_name == "Jd. América"
        assert row.withheld_amount_display == "R$ 750,00"


class TestWriteOffs:
    async def test_list(self) -> None:
        repo = AsyncMock()
        repo.list_write_offs.return_value = [_make_write_off()]
        svc = EventApplicationService(repo=repo, venues=_venues())

        result = await svc.list_write_offs(MagicMock())

        assert result.items[0].amount == Decimal("320.00")
        assert result.items[0].venue is not None

    async def test_create_locks_venue_and_inserts(self) -> None:
        repo = AsyncMock()
        repo.insert_write_off.return_value = _make_write_off()
        svc = EventApplicationService(repo=repo, venues=_venues())
        db = _make_db()
        req = CreateWriteOffRequest(
            venue_id=2, amount=Decimal("320"), note="  Torneio de sábado  "
        )

        result = await svc.create_write_off(db, req)

        assert isinstance(result, EventWriteOffOut)
        kwargs = repo.insert_write_off.call_args.kwargs
        assert kwargs["venue_id"] == 2
        assert kwargs["amount"] == Decimal("320")
        assert kwargs["note"] == "Torneio de sábado"
        assert kwargs["occurred_at"].tzinfo is not None
        db.begin.assert_called_once()

    async def test_blank_note_stored_as_null(self) -> None:
        repo = AsyncMock()
        repo.insert_write_off.return_value = _make_write_off(note=None)
        svc = EventApplicationService(repo=repo, venues=_venues())

        await svc.create_write_off(
            _make_db(), CreateWriteOffRequest(venue_id=2, amount=Decimal("1"), note="   ")
        )

        assert repo.insert_write_off.call_args.kwargs["note"] is None

    async def test_unknown_venue_writes_nothing(self) -> None:
        repo = AsyncMock()
        svc = EventApplicationService(repo=repo, venues=_venues(None))

        with pytest.raises(VenueNotFoundError):
            await svc.create_write_off(
                _make_db(), CreateWriteOffRequest(venue_id=9, amount=Decimal("1"))
            )

        repo.insert_write_off.assert_not_awaited()

    def test_negative_amount_rejected(self) -> None:
        with pytest.raises(ValidationError):
            CreateWriteOffRequest(venue_id=2, amount=Decimal("-1"))
