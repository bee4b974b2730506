"""Unit tests for BalanceAggregator using a mock JackpotRepository."""

from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

from src.jp_common.enums import GameVariant
from src.jp_jackpot.domain.aggregator import BalanceAggregator
from src.jp_jackpot.domain.models import LedgerLine


class TestCurrentBalance:
    async def test_folds_key_lines(self) -> None:
        repo = AsyncMock()
        repo.list_ledger_lines.return_value = [
            LedgerLine(1, GameVariant.TEXAS, Decimal("700")),
            LedgerLine(1, GameVariant.TEXAS, Decimal("-50")),
        ]
        agg = BalanceAggregator(repo=repo)
        db = MagicMock()

        balance = await agg.current_balance(db, 1, GameVariant.TEXAS)

        assert balance == Decimal("650")
        repo.list_ledger_lines.assert_awaited_once_with(db, 1, GameVariant.TEXAS, None)

    async def test_forwards_excluded_payout(self) -> None:
        repo = AsyncMock()
        repo.list_ledger_lines.return_value = []
        agg = BalanceAggregator(repo=repo)
        db = MagicMock()

        balance = await agg.current_balance(db, 3, GameVariant.OMAHA, exclude_payout_id=12)

        assert balance == Decimal("0")
        repo.list_ledger_lines.assert_awaited_once_with(db, 3, GameVariant.OMAHA, 12)

    async def test_raw_variant_is_normalized(self) -> None:
        repo = AsyncMock()
        repo.list_ledger_lines.return_value = []
        agg = BalanceAggregator(repo=repo)
        db = MagicMock()

        await agg.current_balance(db, 1, "omaha")  # type: ignore[arg-type]

        repo.list_ledger_lines.assert_awaited_once_with(db, 1, GameVariant.TEXAS, None)

    async def test_overdrawn_pool_is_zero(self) -> None:
        repo = AsyncMock()
        repo.list_ledger_lines.return_value = [
            LedgerLine(1, GameVariant.TEXAS, Decimal("10")),
            LedgerLine(1, GameVariant.TEXAS, Decimal("-1000")),
        ]
        agg = BalanceAggregator(repo=repo)

        assert await agg.current_balance(MagicMock(), 1, GameVariant.TEXAS) == Decimal("0")


class TestAllBalances:
    async def test_groups_presummed_rows(self) -> None:
        repo = AsyncMock()
        repo.list_all_ledger_lines.return_value = [
            LedgerLine(2, GameVariant.TEXAS, Decimal("1500.555"), "Jd. América"),
            LedgerLine(1, GameVariant.OMAHA, Decimal("-20"), "Alphaville"),
            LedgerLine(1, GameVariant.TEXAS, Decimal("643.5"), "Alphaville"),
        ]
        agg = BalanceAggregator(repo=repo)

        result = await agg.all_balances(MagicMock())

        assert [(b.venue_name, b.variant, b.amount) for b in result] == [
            ("Alphaville", GameVariant.OMAHA, Decimal("0")),
            ("Alphaville", GameVariant.TEXAS, Decimal("643.50")),
            ("Jd. América", GameVariant.TEXAS, Decimal("1500.56")),
        ]
