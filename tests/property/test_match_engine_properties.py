"""Property-based tests for matching and the proficiency scale"""

from hypothesis import given, strategies as st

from matching.engine import MatchEngine
from matching.profiles import CandidateProfile, RequirementSet
from matching.proficiency import ProficiencyScale, Ordering
from backend.app.models.skill import ProficiencyLevel


# Test data strategies
levels = st.sampled_from(list(ProficiencyLevel))
skill_ids = st.integers(min_value=0, max_value=5)
requirement_rows = st.lists(st.tuples(skill_ids, levels), max_size=4)
skill_maps = st.dictionaries(skill_ids, levels, max_size=6)
populations = st.lists(skill_maps, max_size=12)


def build_population(skill_maps_list):
    return [
        CandidateProfile(id=index, name=f"Person {index}", skills=skills)
        for index, skills in enumerate(skill_maps_list)
    ]


@given(levels, levels)
def test_compare_is_antisymmetric(a, b):
    assert ProficiencyScale.compare(a, b).value == -ProficiencyScale.compare(b, a).value


@given(levels, levels)
def test_meets_or_exceeds_agrees_with_compare(attained, required):
    expected = ProficiencyScale.compare(attained, required) != Ordering.LESS
    assert ProficiencyScale.meets_or_exceeds(attained, required) == expected


@given(levels)
def test_levels_at_or_above_all_meet_floor(floor):
    above = ProficiencyScale.levels_at_or_above(floor)
    assert floor in above
    for level in ProficiencyScale.levels():
        assert (level in above) == ProficiencyScale.meets_or_exceeds(level, floor)


@given(populations)
def test_empty_requirements_always_empty(skill_maps_list):
    requirements = RequirementSet.from_rows("project", [])
    assert MatchEngine().match(requirements, build_population(skill_maps_list)) == []


@given(requirement_rows, populations)
def test_every_result_meets_every_requirement(rows, skill_maps_list):
    requirements = RequirementSet.from_rows("project", rows)
    results = MatchEngine().match(requirements, build_population(skill_maps_list))

    for result in results:
        assert result.match_score >= 0
        for requirement in requirements:
            attained = result.candidate.level_for(requirement.skill_id)
            assert attained is not None
            assert ProficiencyScale.meets_or_exceeds(attained, requirement.min_level)


@given(requirement_rows, populations)
def test_excluded_candidates_miss_or_fall_short(rows, skill_maps_list):
    requirements = RequirementSet.from_rows("project", rows)
    population = build_population(skill_maps_list)
    matched = {result.candidate.id for result in MatchEngine().match(requirements, population)}

    for profile in population:
        qualifies = not requirements.is_empty() and all(
            profile.level_for(req.skill_id) is not None
            and ProficiencyScale.meets_or_exceeds(profile.level_for(req.skill_id), req.min_level)
            for req in requirements
        )
        assert (profile.id in matched) == qualifies


@given(requirement_rows, populations)
def test_results_sorted_with_stable_ties(rows, skill_maps_list):
    requirements = RequirementSet.from_rows("project", rows)
    results = MatchEngine().match(requirements, build_population(skill_maps_list))

    for earlier, later in zip(results, results[1:]):
        assert earlier.match_score >= later.match_score
        if earlier.match_score == later.match_score:
            # population ids are assigned in order
            assert earlier.candidate.id < later.candidate.id


@given(requirement_rows, skill_maps)
def test_score_is_total_surplus(rows, skills):
    requirements = RequirementSet.from_rows("project", rows)
    profile = CandidateProfile(id=0, name="Solo", skills=skills)
    score = MatchEngine().evaluate(profile, requirements)

    if score is not None:
        assert score == sum(
            ProficiencyScale.rank(skills[req.skill_id]) - ProficiencyScale.rank(req.min_level)
            for req in requirements
        )
