"""Global enums - must match DB CHECK constraints exactly."""

from enum import Enum


class GameVariant(str, Enum):
    TEXAS = "Texas"
    OMAHA = "Omaha"

    @classmethod
    def normalize(cls, value: object) -> "GameVariant":
        """Only the literal "Omaha" selects Omaha; everything else is Texas."""
        if value is cls.OMAHA or value == cls.OMAHA.value:
            return cls.OMAHA
        return cls.TEXAS


class RuleKind(str, Enum):
    FIXED = "FIXED"
    PERCENTAGE = "PERCENTAGE"
