"""Tests for jp_common.enums."""

from src.jp_common.enums import GameVariant, RuleKind


class TestGameVariant:
    def test_values_match_db_check(self) -> None:
        assert {v.value for v in GameVariant} == {"Texas", "Omaha"}

    def test_str_enum(self) -> None:
        assert GameVariant.OMAHA == "Omaha"
        assert GameVariant("Texas") is GameVariant.TEXAS


class TestNormalize:
    def test_exact_omaha(self) -> None:
        assert GameVariant.normalize("Omaha") is GameVariant.OMAHA

    def test_member_passthrough(self) -> None:
        assert GameVariant.normalize(GameVariant.OMAHA) is GameVariant.OMAHA
        assert GameVariant.normalize(GameVariant.TEXAS) is GameVariant.TEXAS

    def test_anything_else_is_texas(self) -> None:
        for raw in ["Texas", "omaha", "OMAHA", "Hold'em", "", None, 3]:
            assert GameVariant.normalize(raw) is GameVariant.TEXAS


class TestRuleKind:
    def test_values(self) -> None:
        assert RuleKind.FIXED.value == "FIXED"
        assert RuleKind.PERCENTAGE.value == "PERCENTAGE"
