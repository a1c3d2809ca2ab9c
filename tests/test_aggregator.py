import itertools

import pytest

from compatibility import (
    calculate_compatibility_score,
    CompatibilityScorer,
    ScoringWeights,
    SubjectAnalysis,
)
from compatibility.scoring import calculate_load_balance_score, create_scorer_from_config


FULL_TEACHER = {
    "subject_id": "t1",
    "saju": {"elements": {"목": 2, "화": 1, "토": 2, "금": 1, "수": 2}},
    "mbti": {"E": 80, "S": 50, "T": 60, "J": 70},
    "name": {"grids": {"won": 10, "hyung": 20, "yi": 30, "jeong": 40}},
    "learning_style": {"visual": 40, "auditory": 30, "read_write": 20, "kinesthetic": 10},
}

ANALYSES = ["saju", "mbti", "name", "learning_style"]


def subset(bundle, keys):
    return {k: v for k, v in bundle.items() if k in keys or k == "subject_id"}


def test_all_missing_uses_fallbacks():
    result = calculate_compatibility_score({}, {})
    assert result.breakdown.saju == 0
    assert result.breakdown.mbti == 0.5
    assert result.breakdown.name == 0
    assert result.breakdown.learning_style == 0.5
    assert result.load_balance == 1.0
    assert result.overall == pytest.approx(0.40)
    assert result.reasons


def test_every_presence_combination_yields_complete_score():
    combos = [
        keys
        for r in range(len(ANALYSES) + 1)
        for keys in itertools.combinations(ANALYSES, r)
    ]
    for teacher_keys, student_keys in itertools.product(combos, repeat=2):
        result = calculate_compatibility_score(
            subset(FULL_TEACHER, teacher_keys),
            subset(FULL_TEACHER, student_keys),
        )
        breakdown = result.breakdown.to_dict()
        assert set(breakdown) == set(ANALYSES)
        assert all(0.0 <= v <= 1.0 for v in breakdown.values())
        assert 0.0 <= result.overall <= 1.0


def test_identical_bundles_score_one():
    teacher = dict(FULL_TEACHER, current_load=5)
    result = calculate_compatibility_score(teacher, FULL_TEACHER)
    assert result.breakdown.to_dict() == pytest.approx(
        {"saju": 1.0, "mbti": 1.0, "name": 1.0, "learning_style": 1.0}
    )
    assert result.load_balance == 1.0
    assert result.overall == pytest.approx(1.0)
    assert result.overall_percent == 100.0


def test_overloaded_teacher_lowers_overall():
    teacher = dict(FULL_TEACHER, current_load=35)
    result = calculate_compatibility_score(teacher, FULL_TEACHER)
    assert result.load_balance == 0.0
    assert result.overall == pytest.approx(0.85)


def test_learning_style_derived_from_mbti_when_absent():
    teacher = {"mbti": {"E": 80, "S": 50, "T": 60, "J": 70}}
    student = {"mbti": {"E": 80, "S": 50, "T": 60, "J": 70}}
    result = calculate_compatibility_score(teacher, student)
    assert result.breakdown.learning_style == pytest.approx(1.0)


def test_explicit_learning_style_overrides_mbti():
    teacher = {"mbti": {"E": 0, "S": 0, "T": 0, "J": 0}, "learning_style": {"visual": 1}}
    student = {"mbti": {"E": 100, "S": 100, "T": 100, "J": 100}, "learning_style": {"visual": 5}}
    result = calculate_compatibility_score(teacher, student)
    assert result.breakdown.mbti == pytest.approx(0.0)
    assert result.breakdown.learning_style == pytest.approx(1.0)


def test_custom_weights():
    weights = ScoringWeights(mbti=1.0, learning_style=0.0, saju=0.0, name=0.0, load_balance=0.0)
    teacher = {"mbti": {"E": 60, "S": 50, "T": 60, "J": 70}, "current_load": 40}
    student = {"mbti": {"E": 80, "S": 50, "T": 60, "J": 70}}
    result = calculate_compatibility_score(teacher, student, weights)
    assert result.overall == pytest.approx(0.95)


def test_accepts_subject_analysis_objects():
    teacher = SubjectAnalysis.from_dict(FULL_TEACHER)
    result = calculate_compatibility_score(teacher, FULL_TEACHER)
    assert result.overall == pytest.approx(1.0)


@pytest.mark.parametrize("weights", [
    ScoringWeights(mbti=-0.1),
    ScoringWeights(mbti=0, learning_style=0, saju=0, name=0),
])
def test_invalid_weights_rejected(weights):
    with pytest.raises(ValueError):
        CompatibilityScorer(weights)


@pytest.mark.parametrize("load,expected", [
    (None, 1.0),
    (0, 1.0),
    (10, 1.0),
    (11, 2 / 3),
    (20, 2 / 3),
    (21, 1 / 3),
    (30, 1 / 3),
    (31, 0.0),
])
def test_load_balance_tiers(load, expected):
    assert calculate_load_balance_score(load) == pytest.approx(expected)


def test_unknown_load_reads_as_free_capacity():
    with_load = calculate_compatibility_score(dict(FULL_TEACHER, current_load=3), FULL_TEACHER)
    without_load = calculate_compatibility_score(FULL_TEACHER, FULL_TEACHER)
    assert with_load.reasons == without_load.reasons
    assert any("Few students currently assigned" in r for r in without_load.reasons)
    assert any("personality and learning style" in r for r in without_load.reasons)

    busy = calculate_compatibility_score(dict(FULL_TEACHER, current_load=35), FULL_TEACHER)
    assert not any("assigned" in r for r in busy.reasons)


def test_unknown_load_counts_as_empty_roster():
    student = {"mbti": {"E": 50, "S": 50, "T": 50, "J": 50}}
    unknown = {"subject_id": "unknown", "mbti": {"E": 90, "S": 50, "T": 50, "J": 50}}
    known = {
        "subject_id": "known",
        "mbti": {"E": 90, "S": 70, "T": 50, "J": 50},
        "current_load": 5,
    }
    unknown_score = calculate_compatibility_score(unknown, student)
    known_score = calculate_compatibility_score(known, student)
    assert unknown_score.load_balance == known_score.load_balance == 1.0
    assert unknown_score.overall > known_score.overall

    ranking = CompatibilityScorer().rank(student, [known, unknown])
    assert [subject_id for subject_id, _ in ranking] == ["unknown", "known"]


def test_mbti_without_percentages_falls_back():
    result = calculate_compatibility_score({"mbti": {"percentages": None}}, {})
    assert result.breakdown.mbti == 0.5
    assert SubjectAnalysis.from_dict({"mbti": {"percentages": None}}).mbti is None


def test_rank_orders_best_first_and_keeps_ties_stable():
    student = {"mbti": {"E": 80, "S": 50, "T": 60, "J": 70}}
    teachers = [
        {"subject_id": "far", "mbti": {"E": 0, "S": 0, "T": 0, "J": 0}},
        {"subject_id": "close", "mbti": {"E": 80, "S": 50, "T": 60, "J": 70}},
        {"subject_id": "close_twin", "mbti": {"E": 80, "S": 50, "T": 60, "J": 70}},
    ]
    scorer = CompatibilityScorer()
    ranking = scorer.rank(student, teachers)
    assert [subject_id for subject_id, _ in ranking] == ["close", "close_twin", "far"]

    top = scorer.rank(student, teachers, top_k=1)
    assert [subject_id for subject_id, _ in top] == ["close"]


def test_effective_weights_sum_to_one():
    weights = CompatibilityScorer().get_effective_weights()
    assert sum(weights.values()) == pytest.approx(1.0)


def test_scorer_from_config_overrides_defaults():
    config = {"scoring": {"weights": {"saju": 0.5}}}
    scorer = create_scorer_from_config(config)
    assert scorer.weights.saju == 0.5
    assert scorer.weights.mbti == 0.25


def test_weights_save_and_load(tmp_path):
    path = tmp_path / "weights.json"
    weights = ScoringWeights(mbti=0.4, learning_style=0.1)
    weights.save(str(path))
    assert ScoringWeights.load(str(path)) == weights


def test_score_to_dict():
    result = calculate_compatibility_score(dict(FULL_TEACHER, current_load=12), FULL_TEACHER)
    d = result.to_dict()
    assert set(d) == {"overall", "overall_percent", "breakdown", "load_balance", "reasons"}
    assert d["load_balance"] == pytest.approx(2 / 3)
