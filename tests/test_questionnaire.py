import pytest

from compatibility.questionnaire import (
    MbtiQuestion,
    score_mbti,
    score_vark,
    determine_vark_type,
    calculate_progress,
)


MBTI_QUESTIONS = [
    MbtiQuestion(id=i + 1, dimension=dim, pole=pole)
    for i, (dim, pole) in enumerate([
        ("EI", "E"), ("EI", "I"),
        ("SN", "S"), ("SN", "N"),
        ("TF", "T"), ("TF", "F"),
        ("JP", "J"), ("JP", "P"),
    ])
]

VARK_QUESTIONS = [
    {"id": 1, "type": "V"},
    {"id": 2, "type": "A"},
    {"id": 3, "type": "R"},
    {"id": 4, "type": "K"},
]


def test_score_mbti_percentages_and_type():
    responses = {"1": 4, "2": 1, "3": 2, "4": 2, "5": 5, "7": 1, "8": 3}
    result = score_mbti(responses, MBTI_QUESTIONS)

    assert result.scores["e"] == 4
    assert result.percentages == {
        "E": 80, "I": 20, "S": 50, "N": 50, "T": 100, "F": 0, "J": 25, "P": 75
    }
    # S/N tie resolves to S
    assert result.mbti_type == "ESTP"

    percentages = result.to_percentages()
    assert (percentages.E, percentages.S, percentages.T, percentages.J) == (80, 50, 100, 25)


def test_score_mbti_unanswered_axes_stay_empty():
    result = score_mbti({1: 2, 2: 3}, MBTI_QUESTIONS)
    assert result.mbti_type == "I"
    assert result.percentages["E"] == 40
    assert result.percentages["S"] == 0
    assert result.percentages["N"] == 0


def test_score_mbti_accepts_question_dicts():
    questions = [{"id": 1, "dimension": "EI", "pole": "e"}, {"id": 2, "dimension": "EI", "pole": "i"}]
    result = score_mbti({"1": 1, "2": 1}, questions)
    assert result.mbti_type == "E"
    assert result.percentages["E"] == 50


def test_score_vark_dominant_types():
    result = score_vark({"1": 5, "2": 3, "3": 1, "4": 1}, VARK_QUESTIONS)
    assert result.percentages == {"V": 50, "A": 30, "R": 10, "K": 10}
    assert result.vark_type == "VA"


def test_score_vark_rounding_drift_goes_to_largest():
    result = score_vark({"1": 1, "2": 1, "3": 1}, VARK_QUESTIONS)
    assert result.percentages == {"V": 34, "A": 33, "R": 33, "K": 0}
    assert sum(result.percentages.values()) == 100
    assert result.vark_type == "VAR"


def test_score_vark_without_answers_is_multimodal():
    result = score_vark({}, VARK_QUESTIONS)
    assert result.percentages == {"V": 25, "A": 25, "R": 25, "K": 25}
    assert result.vark_type == "VARK"


@pytest.mark.parametrize("percentages,expected", [
    ({"V": 25, "A": 25, "R": 25, "K": 25}, "VARK"),
    ({"V": 28, "A": 28, "R": 28, "K": 16}, "VAR"),
    ({"V": 10, "A": 20, "R": 30, "K": 40}, "KR"),
    ({"V": 27, "A": 27, "R": 27, "K": 19}, "VARK"),
])
def test_determine_vark_type(percentages, expected):
    assert determine_vark_type(percentages) == expected


def test_vark_result_bridges_to_learning_style():
    result = score_vark({"1": 5, "2": 3, "3": 1, "4": 1}, VARK_QUESTIONS)
    scores = result.to_learning_style_scores()
    assert scores.visual == 50
    assert scores.read_write == 10


def test_calculate_progress():
    progress = calculate_progress({"1": 3, "2": 4, "3": 5}, 8)
    assert progress == {"answered_count": 3, "total_questions": 8, "percentage": 38}
    assert calculate_progress({}, 0)["percentage"] == 0
