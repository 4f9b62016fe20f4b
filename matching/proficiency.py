"""Proficiency scale: the single ranking of skill levels"""

import enum
from typing import Any, Dict, List

from backend.app.models.skill import ProficiencyLevel
from backend.app.core.exceptions import InvalidLevelException


class Ordering(int, enum.Enum):
    """Result of comparing two proficiency levels"""
    LESS = -1
    EQUAL = 0
    GREATER = 1


class ProficiencyScale:
    """
    Total order over the four proficiency labels

    Matching, advanced search and analytics all compare levels through this
    class so that there is exactly one rank table in the system.
    """

    RANKS: Dict[ProficiencyLevel, int] = {
        ProficiencyLevel.BEGINNER: 1,
        ProficiencyLevel.INTERMEDIATE: 2,
        ProficiencyLevel.ADVANCED: 3,
        ProficiencyLevel.EXPERT: 4,
    }

    @classmethod
    def parse(cls, level: Any) -> ProficiencyLevel:
        """
        Coerce a label or enum member to a ProficiencyLevel

        Args:
            level: ``ProficiencyLevel`` member or its label (``"Advanced"``)

        Returns:
            Matching ProficiencyLevel

        Raises:
            InvalidLevelException: If the value is not on the scale
        """
        if isinstance(level, ProficiencyLevel):
            return level
        try:
            return ProficiencyLevel(level)
        except (ValueError, TypeError):
            raise InvalidLevelException(level)

    @classmethod
    def rank(cls, level: Any) -> int:
        """Numeric rank of a level, Beginner=1 through Expert=4"""
        return cls.RANKS[cls.parse(level)]

    @classmethod
    def compare(cls, a: Any, b: Any) -> Ordering:
        diff = cls.rank(a) - cls.rank(b)
        if diff < 0:
            return Ordering.LESS
        if diff > 0:
            return Ordering.GREATER
        return Ordering.EQUAL

    @classmethod
    def meets_or_exceeds(cls, attained: Any, required: Any) -> bool:
        """True when ``attained`` ranks at or above ``required``"""
        return cls.rank(attained) >= cls.rank(required)

    @classmethod
    def surplus(cls, attained: Any, required: Any) -> int:
        """Rank difference between an attained and a required level"""
        return cls.rank(attained) - cls.rank(required)

    @classmethod
    def levels_at_or_above(cls, level: Any) -> List[ProficiencyLevel]:
        """
        All levels ranking at or above ``level``, lowest first

        Used to turn a rank floor into an SQL ``IN`` filter.
        """
        floor = cls.rank(level)
        return [member for member, value in cls.RANKS.items() if value >= floor]

    @classmethod
    def levels(cls) -> List[ProficiencyLevel]:
        return sorted(cls.RANKS, key=cls.RANKS.__getitem__)
