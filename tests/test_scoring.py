import os
import sys
import pytest

ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, ROOT_DIR)
from app.services.scoring_service import RATING_FIELDS, average_rating, compute_score, grade_for


def test_no_ratings_and_no_quiz_scores_zero():
    assert compute_score({}, None) == (0, "C")


def test_all_full_marks_is_a_plus():
    ratings = {f: 100 for f in RATING_FIELDS}
    assert compute_score(ratings, 100) == (100.0, "A+")


def test_worked_example():
    score, grade = compute_score({"attendance": 80, "teamwork": 90}, 70)
    assert score == 77.5
    assert grade == "A"


def test_absent_ratings_are_not_counted_as_zero():
    # only the present rating contributes to the mean
    assert average_rating({"attendance": 0}) == 0
    assert average_rating({"attendance": 60, "ethics": None}) == 60
    assert compute_score({"attendance": 60, "ethics": None}, None) == (30.0, "C")


def test_explicit_zero_is_counted():
    assert average_rating({"attendance": 0, "teamwork": 100}) == 50


def test_unknown_keys_are_ignored():
    assert average_rating({"attendance": 50, "weighted_score": 100}) == 50


def test_missing_quiz_counts_as_zero():
    assert compute_score({"attendance": 90}, None) == (45.0, "B")


def test_rounds_to_two_decimals():
    score, _ = compute_score({"attendance": 100, "teamwork": 100, "ethics": 99}, 0)
    assert score == 49.83


@pytest.mark.parametrize("score,expected", [
    (100, "A+"),
    (85.00, "A+"),
    (84.99, "A"),
    (70.00, "A"),
    (69.99, "B+"),
    (55.00, "B+"),
    (54.99, "B"),
    (40.00, "B"),
    (39.99, "C"),
    (0, "C"),
])
def test_grade_band_boundaries(score, expected):
    assert grade_for(score).value == expected


@pytest.mark.parametrize("value,expected", [
    (85.00, "A+"),
    (84.99, "A"),
    (55.00, "B+"),
    (39.99, "C"),
])
def test_boundaries_through_compute_score(value, expected):
    score, grade = compute_score({"communication": value}, value)
    assert score == value
    assert grade == expected


def test_increasing_a_rating_never_lowers_the_score():
    base = {"attendance": 40, "teamwork": 75, "ethics": 10}
    for field in base:
        previous = compute_score(base, 50)[0]
        for value in range(int(base[field]), 101, 5):
            current = compute_score(dict(base, **{field: value}), 50)[0]
            assert current >= previous
            previous = current


def test_grade_is_never_the_placeholder():
    for value in range(0, 101):
        assert compute_score({"analytical": value}, value)[1] != "-"
