"""Unit tests for the proficiency scale"""

import pytest

from matching.proficiency import ProficiencyScale, Ordering
from backend.app.models.skill import ProficiencyLevel
from backend.app.core.exceptions import InvalidLevelException


class TestProficiencyScale:
    """Unit tests for ProficiencyScale"""

    @pytest.mark.parametrize("level,expected", [
        (ProficiencyLevel.BEGINNER, 1),
        (ProficiencyLevel.INTERMEDIATE, 2),
        (ProficiencyLevel.ADVANCED, 3),
        (ProficiencyLevel.EXPERT, 4),
    ])
    def test_rank_values(self, level, expected):
        assert ProficiencyScale.rank(level) == expected

    def test_rank_accepts_labels(self):
        assert ProficiencyScale.rank("Advanced") == 3
        assert ProficiencyScale.parse("Expert") is ProficiencyLevel.EXPERT

    @pytest.mark.parametrize("bad", ["advanced", "Master", "", None, 3])
    def test_unknown_level_raises(self, bad):
        with pytest.raises(InvalidLevelException) as exc_info:
            ProficiencyScale.rank(bad)

        assert exc_info.value.status_code == 500
        assert exc_info.value.level == bad

    def test_compare(self):
        assert ProficiencyScale.compare("Beginner", "Expert") == Ordering.LESS
        assert ProficiencyScale.compare("Expert", "Beginner") == Ordering.GREATER
        assert ProficiencyScale.compare("Advanced", ProficiencyLevel.ADVANCED) == Ordering.EQUAL

    def test_meets_or_exceeds(self):
        assert ProficiencyScale.meets_or_exceeds("Advanced", "Intermediate")
        assert ProficiencyScale.meets_or_exceeds("Intermediate", "Intermediate")
        assert not ProficiencyScale.meets_or_exceeds("Beginner", "Intermediate")

    def test_surplus(self):
        assert ProficiencyScale.surplus("Advanced", "Intermediate") == 1
        assert ProficiencyScale.surplus("Expert", "Expert") == 0

    def test_levels_at_or_above(self):
        assert ProficiencyScale.levels_at_or_above("Advanced") == [
            ProficiencyLevel.ADVANCED,
            ProficiencyLevel.EXPERT,
        ]
        assert ProficiencyScale.levels_at_or_above("Beginner") == ProficiencyScale.levels()

    def test_levels_lowest_first(self):
        assert ProficiencyScale.levels() == [
            ProficiencyLevel.BEGINNER,
            ProficiencyLevel.INTERMEDIATE,
            ProficiencyLevel.ADVANCED,
            ProficiencyLevel.EXPERT,
        ]
